# RUN: python examples/02_connect_token.py
"""Create a connect token for the Pluggy Connect widget."""

import asyncio

from pluggy_sdk import PluggyClient


async def main() -> None:
    client, api_key = await PluggyClient.from_env_with_api_key()
    try:
        connect_token = await client.create_connect_token(api_key)
        print(f"Created a new connect token ({len(connect_token)} chars)")
    finally:
        await client.close()


if __name__ == "__main__":
    asyncio.run(main())
