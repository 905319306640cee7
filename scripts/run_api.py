#!/usr/bin/env python3
"""
Symptom Smart: API server launcher

Run:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000 --config config.yaml
"""

import os
import sys
import argparse
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='Symptom Smart API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--config', default=None, help='YAML configuration file')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')

    args = parser.parse_args()

    if args.config:
        os.environ["SYMPTOM_CONFIG_PATH"] = str(Path(args.config).resolve())

    print("=" * 60)
    print("Symptom Smart: API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Config: {args.config or 'defaults'}")
    print(f"   Reload: {args.reload}")
    print("=" * 60)

    import uvicorn

    uvicorn.run(
        "symptom_smart.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
