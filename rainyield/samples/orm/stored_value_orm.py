from samples.models import StoredValue


def get_stored_value(namespace: str, key: str) -> str | None:
    stored = StoredValue.objects.filter(namespace=namespace, key=key).first()
    if stored is None:
        return None
    return stored.value


def set_stored_value(namespace: str, key: str, value: str) -> StoredValue:
    stored, _ = StoredValue.objects.update_or_create(
        namespace=namespace, key=key, defaults={"value": value}
    )
    return stored


def delete_stored_value(namespace: str, key: str) -> None:
    StoredValue.objects.filter(namespace=namespace, key=key).delete()
