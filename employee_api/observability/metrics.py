"""
Application Metrics with Prometheus
=============================================================================
CONCEPT: Metrics vs Logs

Logs record individual events ("employee 7 created"). Metrics give the
bird's-eye view: "how many creates per minute, and what share of them were
rejected as duplicates?"

  Your App  ──(exposes /metrics)──>  Prometheus  ──(queries)──>  Grafana

METRIC TYPE USED HERE:
  COUNTER: a value that only goes up. Use rate() in PromQL to turn it into
  "operations per second":

    Duplicate-email rejection rate:
      rate(employee_operations_total{operation="create", outcome="conflict"}[5m])
        / rate(employee_operations_total{operation="create"}[5m])
=============================================================================
"""

from prometheus_client import Counter


# =============================================================================
# Counter: Employee Operations
# =============================================================================
# LABELS:
#   operation: "create", "list", "get", "update", "delete", "search"
#   outcome:   "success", "conflict", "not_found"
# =============================================================================
employee_operations_total = Counter(
    name="employee_operations_total",
    documentation="Total number of employee service operations, partitioned by operation and outcome.",
    labelnames=["operation", "outcome"],
)


def record_operation(operation: str, outcome: str = "success") -> None:
    """Count one finished service operation."""
    employee_operations_total.labels(operation=operation, outcome=outcome).inc()
