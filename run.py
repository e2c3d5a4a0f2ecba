# =============================================================================
# File: run.py
# Purpose: Entry point. Configures logging and serves the todo app.
# =============================================================================
import logging
import os

from todoapp import create_app

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

log = logging.getLogger("todoapp")

log.info("Starting server setup...")
app = create_app()

if __name__ == "__main__":
    port = int(os.getenv("PORT", "3000"))
    log.info("Server starting on http://localhost:%d", port)
    app.run(host="0.0.0.0", port=port, threaded=True)
