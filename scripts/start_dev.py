#!/usr/bin/env python3
"""
Development startup script.

Checks keys and configuration, then runs the storefront with auto-reload.
"""

import os
import sys
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import pydantic_settings
        import cryptography
        import jwt
        import bcrypt
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_keys():
    """Check if token signing keys exist."""
    keys_dir = PROJECT_ROOT / "config" / "keys"
    private_key = keys_dir / "token_private.pem"
    public_key = keys_dir / "token_public.pem"

    if private_key.exists() and public_key.exists():
        print("✓ Token keys found")
        return True
    else:
        print("✗ Token keys not found")
        print("\nRun: python scripts/generate_keys.py")
        return False


def start_server(port: int = 8000):
    """Run uvicorn in the foreground until interrupted."""
    keys_dir = PROJECT_ROOT / "config" / "keys"
    env = {
        **os.environ,
        "TOKEN_PUBLIC_KEY_PATH": os.environ.get(
            "TOKEN_PUBLIC_KEY_PATH", str(keys_dir / "token_public.pem")
        ),
        "TOKEN_PRIVATE_KEY_PATH": os.environ.get(
            "TOKEN_PRIVATE_KEY_PATH", str(keys_dir / "token_private.pem")
        ),
    }

    print(f"\n🏪 Starting Storefront on http://localhost:{port} ...")
    print(f"📍 API docs: http://localhost:{port}/docs")
    print("\nPress Ctrl+C to stop")

    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "storefront.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", str(port),
        ],
        cwd=PROJECT_ROOT,
        env=env,
    )

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Stopped.")


def main():
    print("=" * 60)
    print("Storefront - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    if not check_keys():
        response = input("\nGenerate keys now? [Y/n]: ")
        if response.lower() != "n":
            subprocess.run([sys.executable, str(PROJECT_ROOT / "scripts" / "generate_keys.py")])
        else:
            print("Keys are required. Exiting.")
            sys.exit(1)

    print("\n✓ All checks passed!")

    start_server()


if __name__ == "__main__":
    main()
