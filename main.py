# main.py
"""Kaathu - Main entry point for the medication tracker.

Usage:
    python main.py        # Streamlit frontend
    python main.py api    # HTTP API
"""

import os
import subprocess
import sys


def main():
    """Launch the Kaathu Streamlit application or the HTTP API."""
    frontend_path = os.path.join(os.path.dirname(__file__), "src", "frontend", "app.py")

    if len(sys.argv) > 1 and sys.argv[1] == "api":
        command = [
            sys.executable,
            "-m",
            "uvicorn",
            "src.api.app:app",
            "--host",
            "0.0.0.0",
            "--port",
            "8000",
        ]
    else:
        command = [
            sys.executable,
            "-m",
            "streamlit",
            "run",
            frontend_path,
            "--server.port",
            "7860",
            "--server.address",
            "0.0.0.0",
            "--server.runOnSave",
            "true",
        ]

    try:
        subprocess.run(command)
    except KeyboardInterrupt:
        print("\nKaathu stopped.")
    except Exception as e:
        print(f"Error launching Kaathu: {e}")


if __name__ == "__main__":
    main()
