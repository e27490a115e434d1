"""Retry Anthropic API calls on overload (529), rate limit (429) and dropped connections.

Article generation sends long prompts and regularly hits OverloadedError;
retrying with exponential backoff keeps a generate run from failing on a
transient error.
"""

import time

import anthropic
from anthropic._exceptions import OverloadedError, RateLimitError

# OverloadedError is not re-exported from anthropic in some SDK versions
RETRYABLE = (OverloadedError, RateLimitError, anthropic.APIConnectionError)

MAX_RETRIES = 5
BASE_DELAY = 4  # seconds; 4, 8, 16, 32
MAX_DELAY = 120  # cap wait at 2 minutes


def backoff_delay(attempt: int) -> int:
    return min(BASE_DELAY * (2**attempt), MAX_DELAY)


def messages_create_with_retry(
    client: anthropic.Anthropic, max_retries: int = MAX_RETRIES, **kwargs
):
    """Call client.messages.create(**kwargs), retrying transient API errors.

    The last error is re-raised once ``max_retries`` attempts have failed.
    """
    for attempt in range(max_retries):
        try:
            return client.messages.create(**kwargs)
        except RETRYABLE as e:
            if attempt == max_retries - 1:
                raise
            delay = backoff_delay(attempt)
            print(f"  .. API {type(e).__name__}, retrying in {delay}s (attempt {attempt + 1}/{max_retries})...")
            time.sleep(delay)
    raise RuntimeError("retry loop exited without return or raise")
