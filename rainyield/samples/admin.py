from django.contrib import admin

from .models import StoredValue


@admin.register(StoredValue)
class StoredValueAdmin(admin.ModelAdmin):
    list_display = ("namespace", "key", "updated_at")
    search_fields = ("namespace", "key")
