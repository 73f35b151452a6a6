"""Prometheus metrics for monitoring simulation volume, projected gains, and storage health"""

from prometheus_client import Counter, Histogram

# Simulation metrics
simulation_counter = Counter(
    "fico_simulation_total",
    "Total score projections run",
    ["scenario"],  # pre-enrollment | progress-tracker
)

projected_gain_band_counter = Counter(
    "fico_projected_gain_band",
    "Projected score change by band",
    ["band"],  # decline, 0-50, 50-100, 100+
)

impact_penalty_histogram = Histogram(
    "fico_impact_penalty_points",
    "Estimated temporary score drop for pre-enrollment profiles",
    buckets=[20, 40, 60, 80, 100, 125, 150],
)

# Storage metrics
simulation_save_failures_counter = Counter(
    "simulation_save_failures_total",
    "Simulations that could not be stored",
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_simulation(scenario: str, score_gain: int, impact_penalty: int) -> None:
    """Record simulation metrics for monitoring scenario mix and projected outcomes"""
    simulation_counter.labels(scenario=scenario).inc()

    # Band score changes for distribution analysis
    if score_gain < 0:
        band = "decline"
    elif score_gain <= 50:
        band = "0-50"
    elif score_gain <= 100:
        band = "50-100"
    else:
        band = "100+"

    projected_gain_band_counter.labels(band=band).inc()

    if impact_penalty > 0:
        impact_penalty_histogram.observe(impact_penalty)
