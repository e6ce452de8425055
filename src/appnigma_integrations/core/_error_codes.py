# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

# Status code used when no HTTP response was obtained
NO_RESPONSE_STATUS = 0

# Error code constants
NETWORK_ERROR = "NetworkError"
API_ERROR = "APIError"
REQUEST_ERROR = "RequestError"
UNKNOWN_ERROR = "UnknownError"

# Rate limit detail fields carried by 429 response bodies
PLAN_LIMIT_FIELD = "planLimit"
CURRENT_USAGE_FIELD = "currentUsage"
OFFERINGS_FIELD = "offerings"

RATE_LIMIT_STATUS = 429
