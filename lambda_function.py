"""AWS Lambda handler exposing the event facade and alias cache."""
import json
import logging
import os
from typing import Dict, Any

from aggregator.dates import parse_date
from aggregator.event_aggregator import EventAggregator
from aggregator.models import Event
from errors import InvalidArgumentError
from interning.identity_cache import IdentityCache


# Configure JSON logging
class JsonFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'message': record.getMessage(),
            'logger': record.name
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging(log_level: str = 'INFO') -> None:
    """
    Configure logging with JSON formatter.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR)
    """
    root_logger = logging.getLogger()

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root_logger.addHandler(handler)

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))


# Shared across warm invocations of the same container
_aggregator = EventAggregator()
_cache = IdentityCache()


def _event_to_item(event: Event) -> Dict[str, Any]:
    """Convert an Event to a JSON-serializable dict."""
    return {
        'title': event.title,
        'category': event.category.value,
        'starts_on': event.starts_on.isoformat(),
        'ends_on': event.ends_on.isoformat()
    }


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        'statusCode': status_code,
        'body': json.dumps(body)
    }


def handle_request(
    payload: Dict[str, Any],
    aggregator: EventAggregator,
    cache: IdentityCache
) -> Dict[str, Any]:
    """
    Route a request payload to the aggregator or the alias cache.

    Args:
        payload: Request dict carrying either 'date' or 'name'
        aggregator: Event facade used for date queries
        cache: Alias cache used for name lookups

    Returns:
        Response dict with statusCode and JSON body

    Raises:
        InvalidArgumentError: If the payload names neither field or
            carries a malformed value
    """
    if not isinstance(payload, dict):
        raise InvalidArgumentError("Request payload must be an object")

    if 'date' in payload:
        query_date = parse_date(payload['date'])
        events = aggregator.find_events_for_date(query_date)
        return _response(200, {
            'date': query_date.isoformat(),
            'count': len(events),
            'events': [_event_to_item(event) for event in events]
        })

    if 'name' in payload:
        alias = cache.get_or_create(payload['name'])
        return _response(200, {
            'name': payload['name'],
            'alias': str(alias.id)
        })

    raise InvalidArgumentError("Request must include 'date' or 'name'")


def lambda_handler(event: Dict[str, Any], context: Any) -> Dict[str, Any]:
    """
    Main Lambda handler function.

    Args:
        event: Invocation payload, e.g. {"date": "2018-01-10"} or
            {"name": "John Doe"}
        context: Lambda context object

    Returns:
        Response dict with statusCode and JSON body
    """
    log_level = os.environ.get('LOG_LEVEL', 'INFO')

    setup_logging(log_level)
    logger = logging.getLogger(__name__)

    try:
        response = handle_request(event, _aggregator, _cache)
        logger.info(
            "Request handled successfully",
            extra={'status_code': response['statusCode']}
        )
        return response

    except InvalidArgumentError as e:
        logger.warning(f"Rejected invalid request: {str(e)}")
        return _response(400, {
            'message': 'Invalid request',
            'error': str(e),
            'error_type': type(e).__name__
        })

    except Exception as e:
        logger.error(
            f"Request failed: {str(e)}",
            extra={'error_type': type(e).__name__},
            exc_info=True
        )
        return _response(500, {
            'message': 'Request failed',
            'error': str(e),
            'error_type': type(e).__name__
        })
