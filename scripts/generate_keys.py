#!/usr/bin/env python3
"""
Generate the Ed25519 key pair used for identity tokens.

The private key signs tokens; the storefront only needs the public key to
verify them. Also prints development tokens for the seeded demo users.

Usage:
    python scripts/generate_keys.py
"""

import os
import sys
from pathlib import Path

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519

from authtoken import Role, TokenSigner


def generate_ed25519_keys(output_dir: Path) -> tuple[str, str]:
    """
    Generate Ed25519 key pair and save to files.

    Returns:
        Tuple of (private_key_path, public_key_path)
    """
    output_dir.mkdir(parents=True, exist_ok=True)

    private_key = ed25519.Ed25519PrivateKey.generate()
    public_key = private_key.public_key()

    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )

    public_pem = public_key.public_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )

    private_path = output_dir / "token_private.pem"
    public_path = output_dir / "token_public.pem"

    with open(private_path, "wb") as f:
        f.write(private_pem)
    os.chmod(private_path, 0o600)  # Restrict permissions

    with open(public_path, "wb") as f:
        f.write(public_pem)

    return str(private_path), str(public_path)


def main():
    script_dir = Path(__file__).parent
    project_root = script_dir.parent
    keys_dir = project_root / "config" / "keys"

    print("=" * 60)
    print("Identity Token Key Generator")
    print("=" * 60)

    if (keys_dir / "token_private.pem").exists():
        response = input("\nKeys already exist. Overwrite? [y/N]: ")
        if response.lower() != "y":
            print("Aborted.")
            sys.exit(0)

    print("\n1. Generating Ed25519 key pair...")
    private_path, public_path = generate_ed25519_keys(keys_dir)
    print(f"   Private key: {private_path}")
    print(f"   Public key:  {public_path}")

    with open(private_path, "r") as f:
        signer = TokenSigner(private_key_pem=f.read())

    print("\n2. Development tokens for the seeded users:")
    shopper = signer.issue("user-001", "demo shopper", "shopper@example.com", Role.USER)
    admin = signer.issue("admin-001", "store admin", "admin@example.com", Role.ADMIN)
    print(f"   shopper: {shopper}")
    print(f"   admin:   {admin}")

    print("\n" + "=" * 60)
    print("SETUP INSTRUCTIONS")
    print("=" * 60)
    print("\nAdd to config/.env:")
    print(f"   TOKEN_PUBLIC_KEY_PATH={public_path}")
    print(f"   TOKEN_PRIVATE_KEY_PATH={private_path}")
    print("\nSend requests with:")
    print("   Authorization: Bearer <token>")


if __name__ == "__main__":
    main()
