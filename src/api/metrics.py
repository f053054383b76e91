from prometheus_client import Counter, Histogram, Gauge, REGISTRY


# we check if they are already registered to avoid errors during hot reloads or test runs
def get_or_create_metric(name, documentation, metric_type, **kwargs):
    try:
        return metric_type(name, documentation, **kwargs)
    except ValueError:
        return REGISTRY._names_to_collectors[name]


REQUESTS_TOTAL = get_or_create_metric(
    "taskgen_requests_total",
    "Total requests",
    Counter,
    labelnames=["endpoint", "status"],
)

REQUEST_LATENCY_SECONDS = get_or_create_metric(
    "taskgen_request_latency_seconds",
    "Request latency",
    Histogram,
    labelnames=["endpoint"],
)

TASKS_GENERATED_TOTAL = get_or_create_metric(
    "taskgen_tasks_generated_total",
    "Tasks produced by generation, per domain",
    Counter,
    labelnames=["domain"],
)

NOTIFICATIONS_TOTAL = get_or_create_metric(
    "taskgen_notifications_total",
    "Completion webhooks by outcome",
    Counter,
    labelnames=["outcome"],
)

TASKS_CURRENT = get_or_create_metric(
    "taskgen_tasks_current", "Tasks in the current list", Gauge
)
