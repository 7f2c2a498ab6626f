import asyncio
import os
import sys

# Add the project root to sys.path
sys.path.append(os.getcwd())

from toolbridge.bridge import BridgeClient
from toolbridge.config import BridgeConfig
from toolbridge.lifecycle import BridgeLifecycle
from toolbridge.tools import get_tool_registry

async def run_client_test(base_url: str):
    print("\n--- Testing Bridge Server ---")

    async with BridgeClient(base_url) as client:
        try:
            print("1. Testing health check...")
            print(f"✅ Healthy: {await client.health()}")

            print("\n2. Testing 'ls' tool...")
            result = await client.execute_tool("ls", {"path": "."})
            print(f"✅ Entries: {[entry['name'] for entry in result['entries']]}")

            print("\n3. Testing context build...")
            context = await client.build_context()
            print(f"✅ System prompt:\n{context.system_prompt}")

            print("\n4. Testing '/help' command...")
            result = await client.process_command("/help", "slash")
            print(f"✅ Result: {result['result']['message']}")

            print("\n5. Testing '!echo Hello Bridge' command...")
            result = await client.process_command("!echo Hello Bridge", "shell")
            print(f"✅ Result: {result['stdout'].strip()}")

        except Exception as e:
            print(f"❌ ERROR: {e}")

def main():
    lifecycle = BridgeLifecycle()
    server = lifecycle.initialize(
        BridgeConfig(enabled=True, port=0, auto_start=True),
        get_tool_registry()
    )
    try:
        asyncio.run(run_client_test(server.url))
    finally:
        lifecycle.stop()

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pass
