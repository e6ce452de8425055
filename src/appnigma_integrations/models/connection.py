# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""Response shapes returned by the connection endpoints."""

from __future__ import annotations

from typing import List, TypedDict


class ConnectionCredentials(TypedDict):
    """Salesforce access token and metadata for one connection."""

    accessToken: str
    instanceUrl: str
    environment: str  # production, sandbox, ...
    region: str
    tokenType: str  # typically "Bearer"
    expiresAt: str  # ISO 8601


class ConnectionSummary(TypedDict):
    connectionId: str
    userEmail: str
    userName: str
    orgName: str
    environment: str
    region: str
    status: str
    connectedAt: str
    lastActiveAt: str


class _ListConnectionsPage(TypedDict):
    connections: List[ConnectionSummary]
    totalCount: int


class ListConnectionsResponse(_ListConnectionsPage, total=False):
    """One page of connections. Pass ``nextCursor`` back as ``cursor`` for the next page."""

    nextCursor: str


class _ErrorPayload(TypedDict):
    error: str
    message: str


class ErrorDetails(_ErrorPayload, total=False):
    """
    Error payload view returned by :meth:`AppnigmaAPIError.details`.

    The plan fields are only present for rate limited (429) responses.
    """

    planLimit: int
    currentUsage: int
    offerings: List[str]
