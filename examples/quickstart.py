# Copyright (c) Appnigma, Inc.
# Licensed under the MIT license.

"""
Appnigma Integrations Client - Quickstart

Lists connected Salesforce orgs, fetches credentials for the first one and
runs a SOQL query through the Appnigma proxy.

Prerequisites:
- ``pip install -e .``
- ``APPNIGMA_API_KEY`` set in the environment
"""

import asyncio
import logging
import sys

from appnigma_integrations import AppnigmaAPIError, AppnigmaClient, SalesforceProxyRequest


async def main(debug: bool = False) -> int:
    if debug:
        logging.basicConfig(level=logging.DEBUG)

    async with AppnigmaClient(debug=debug) as client:
        page = await client.list_connections(status="connected", limit=10)
        print({"totalCount": page["totalCount"], "nextCursor": page.get("nextCursor")})
        if not page["connections"]:
            print("No connected orgs.")
            return 0

        connection_id = page["connections"][0]["connectionId"]
        creds = await client.get_connection_credentials(connection_id)
        print({"instanceUrl": creds["instanceUrl"], "expiresAt": creds["expiresAt"]})

        try:
            result = await client.proxy_salesforce_request(
                connection_id,
                SalesforceProxyRequest(
                    method="GET",
                    path="/services/data/v59.0/query",
                    query={"q": "SELECT Id, Name FROM Account LIMIT 5"},
                ),
            )
        except AppnigmaAPIError as e:
            print({"status_code": e.status_code, "error_code": e.error_code, "message": e.message})
            return 1

        for record in result.get("records", []):
            print(record["Name"])
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main(debug="--debug" in sys.argv)))
