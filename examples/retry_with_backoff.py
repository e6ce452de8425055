# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Caller-side retry with exponential backoff.

The SDK never retries. This example retries network failures, 5xx responses
and rate limits, and reports plan usage when the monthly limit is reached.
"""

import random
import sys
import time

from appnigma_integrations import AppnigmaAPIError, AppnigmaSyncClient


def _should_retry(error: AppnigmaAPIError) -> bool:
    return error.is_network_error or error.is_rate_limited or error.status_code >= 500


def with_backoff(call, retries: int = 4, base_delay: float = 0.5, max_delay: float = 30.0):
    for attempt in range(retries + 1):
        try:
            return call()
        except AppnigmaAPIError as e:
            if attempt == retries or not _should_retry(e):
                raise
            if e.is_rate_limited:
                details = e.details()
                if "planLimit" in details:
                    print(f"Plan usage {details.get('currentUsage')}/{details['planLimit']}")
            delay = min(base_delay * (2**attempt), max_delay)
            delay += random.uniform(0, delay * 0.25)
            print(f"{e.error_code} ({e.status_code}); retrying in {delay:.2f}s")
            time.sleep(delay)


def main() -> int:
    if len(sys.argv) < 2:
        print("usage: retry_with_backoff.py CONNECTION_ID")
        return 2
    connection_id = sys.argv[1]
    with AppnigmaSyncClient() as client:
        creds = with_backoff(lambda: client.get_connection_credentials(connection_id))
    print({"instanceUrl": creds["instanceUrl"], "tokenType": creds["tokenType"]})
    return 0


if __name__ == "__main__":
    sys.exit(main())
