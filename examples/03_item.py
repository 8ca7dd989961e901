# RUN: python examples/03_item.py
"""Validate sandbox credentials, create an item, then clean it up.

Set PLUGGY_LOG_LEVEL=DEBUG to see every request.

Demonstrates: validate_parameters(), create_item(), get_item(), delete_item().
"""

import asyncio

from pluggy_sdk import PluggyClient

SANDBOX_CONNECTOR_ID = 2


async def main() -> None:
    parameters = {"user": "user-ok", "password": "password-ok"}

    client, api_key = await PluggyClient.from_env_with_api_key(setup_logging=True)
    try:
        # 1. Dry-run the credentials
        result = await client.validate_parameters(api_key, SANDBOX_CONNECTOR_ID, parameters)
        if not result.is_valid:
            for error in result.errors:
                print(f"{error.parameter}: {error.message}")
            return

        # 2. Create the item; execution continues server-side
        item = await client.create_item(api_key, SANDBOX_CONNECTOR_ID, parameters)
        print(f"Item {item.id}: {item.status} / {item.execution_status}")

        # 3. Observe it once more, then delete it
        item = await client.get_item(api_key, item.id)
        print(f"Item {item.id}: {item.status} / {item.execution_status}")
        await client.delete_item(api_key, item.id)
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
