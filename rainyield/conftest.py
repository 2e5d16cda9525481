import os

# Spans from the test run have nowhere to go
os.environ.setdefault("DD_TRACE_ENABLED", "false")
