"""Prometheus metrics utilities."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Histogram

from warehouse_shelving.enterprise.core import ViolationKind

metrics_registry = CollectorRegistry()

REQUEST_COUNTER = Counter(
    "warehouse_shelving_api_requests_total",
    "Total number of API requests handled",
    registry=metrics_registry,
)

WAREHOUSES_CREATED_COUNTER = Counter(
    "warehouse_shelving_warehouses_created_total",
    "Warehouses accepted and persisted",
    registry=metrics_registry,
)

SHELF_RULE_REJECTIONS = Counter(
    "warehouse_shelving_shelf_rule_rejections_total",
    "Warehouse configurations rejected by the shelf rules",
    ["kind"],
    registry=metrics_registry,
)

PERMUTATION_DURATION = Histogram(
    "warehouse_shelving_permutation_seconds",
    "Duration of shelf permutation enumeration",
    buckets=(0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0),
    registry=metrics_registry,
)


def record_warehouse_created() -> None:
    WAREHOUSES_CREATED_COUNTER.inc()


def record_rejection(kind: ViolationKind) -> None:
    SHELF_RULE_REJECTIONS.labels(kind=kind.value).inc()
