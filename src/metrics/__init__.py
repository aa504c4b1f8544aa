"""Metrics module for Justify service."""

from prometheus_client import (
    Counter,
    Histogram,
)

# Counter to track REST API calls
# This will be used to count how many times each API endpoint is called
# and the status code of the response
rest_api_calls_total = Counter(
    "js_rest_api_calls_total", "REST API calls counter", ["path", "status_code"]
)

# Histogram to measure response durations
# This will be used to track how long it takes to handle requests
response_duration_seconds = Histogram(
    "js_response_duration_seconds", "Response durations", ["path"]
)

# Metric that counts issued access tokens
access_tokens_issued_total = Counter(
    "js_access_tokens_issued_total", "Access tokens issued"
)

# Metric that counts words admitted by the daily quota
words_reserved_total = Counter("js_words_reserved_total", "Words admitted by quota")

# Metric that counts requests refused because the daily quota was exhausted
quota_rejections_total = Counter(
    "js_quota_rejections_total", "Requests refused by quota"
)
