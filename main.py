"""
Review Compass - Web Server Entry Point
=======================================

Run this to start the REST backend and dashboard:
    python main.py

Then open http://127.0.0.1:8000 in your browser.

To list or send review requests from the command line:
    python run_outreach.py
"""

import os

import uvicorn


def main():
    """Start the web server."""
    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))

    print("\n" + "=" * 50)
    print("   Review Compass - Review Request Manager")
    print("=" * 50)
    print(f"\n   Starting server at http://{host}:{port}")
    print("   Press Ctrl+C to stop\n")

    uvicorn.run(
        "reviewcompass.web.app:app",
        host=host,
        port=port,
        reload=True,
        log_level="info"
    )


if __name__ == "__main__":
    main()
