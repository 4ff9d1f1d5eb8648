"""Metrics module for LLM Playground service."""

from prometheus_client import (
    Counter,
    Histogram,
)

# Counter to track REST API calls
# This will be used to count how many times each API endpoint is called
# and the status code of the response
rest_api_calls_total = Counter(
    "playground_rest_api_calls_total", "REST API calls counter", ["path", "status_code"]
)

# Histogram to measure response durations
# This will be used to track how long it takes to handle requests
response_duration_seconds = Histogram(
    "playground_response_duration_seconds", "Response durations", ["path"]
)

# Metric that counts how many completion API calls succeeded for each model
llm_calls_total = Counter("playground_llm_calls_total", "LLM calls counter", ["model"])

# Metric that counts how many completion API calls failed
llm_calls_failures_total = Counter(
    "playground_llm_calls_failures_total", "LLM calls failures"
)

# Metric that counts how many generation requests had validation errors
llm_calls_validation_errors_total = Counter(
    "playground_llm_validation_errors_total", "LLM validation errors"
)

# Total tokens reported by the completion API for each model
llm_token_used_total = Counter(
    "playground_llm_token_used_total", "LLM tokens used", ["model"]
)
