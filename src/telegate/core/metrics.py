from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest
from starlette.responses import Response

WEBHOOK_REQUEST_COUNTER = Counter(
    'telegate_webhook_requests_total',
    'Webhook deliveries by outcome',
    ['outcome'],
)
UPDATE_COUNTER = Counter(
    'telegate_updates_total',
    'Updates routed by the dispatcher',
    ['kind', 'outcome'],
)
BOT_API_CALL_COUNTER = Counter(
    'telegate_bot_api_calls_total',
    'Bot API calls',
    ['method', 'outcome'],
)
BOT_API_LATENCY = Histogram(
    'telegate_bot_api_latency_seconds',
    'Bot API call latency',
    ['method'],
)


def metrics_response() -> Response:
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
