"""Runtime configuration, read from the environment at import time."""

import os

HOST = os.environ.get("HOST", "0.0.0.0")

# Matches containerPort in k8s/deployment.yaml
PORT = int(os.environ.get("PORT", "3000"))

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
