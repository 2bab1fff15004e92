"""
Configuration for the auth module.

This defines the credential table the gate verifies against. For demo
purposes it is an in-memory dictionary of plaintext passwords, which is
NOT secure. It is built once at startup and never mutated at runtime.
"""

from typing import Dict
import os


def load_users() -> Dict[str, str]:
    """
    Build the demo credential table (username → password).

    Passwords can be overridden through the environment so a demo deployment
    does not have to ship the tutorial defaults.
    """
    return {
        "admin": os.getenv("ADMIN_USER_PASSWORD", "password123"),
        "user": os.getenv("DEMO_USER_PASSWORD", "userpass"),
    }


# Default table used by the app factory when none is injected.
USERS: Dict[str, str] = load_users()
