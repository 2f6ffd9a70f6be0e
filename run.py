"""Development entry point for running the bouncer statistics charts."""

import os
import sys
from bouncerstats.app import create_app
from dotenv import load_dotenv

if getattr(sys, "frozen", False):
    load_dotenv(os.path.join(sys._MEIPASS, ".env"))
else:
    load_dotenv()

app = create_app()

if __name__ == "__main__":
    app.run(
        host=os.getenv("BOUNCER_HOST", "127.0.0.1"),
        port=int(os.getenv("BOUNCER_PORT", "5000")),
    )
