# RUN: python examples/01_connectors.py
"""List every connector, sandbox ones included.

Requires PLUGGY_CLIENT_ID and PLUGGY_CLIENT_SECRET in the environment.
"""

import asyncio

from pluggy_sdk import PluggyClient


async def main() -> None:
    client, api_key = await PluggyClient.from_env_with_api_key()
    try:
        connectors = await client.get_connectors(api_key, sandbox=True)
        for connector in connectors:
            print(f"Connector #{connector.id}: {connector.name} ({connector.connector_type})")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
