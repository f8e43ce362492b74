#!/usr/bin/env python3
"""
MedTerms — Запуск Web UI (Streamlit)

Запуск:
    python scripts/run_web.py
    python scripts/run_web.py --port 8502 --config med_terms.yaml

Backend задається через SUPABASE_URL / SUPABASE_PUBLISHABLE_KEY
або YAML-файл (--config, MED_TERMS_CONFIG).
"""

import os
import sys
import subprocess
import argparse
from pathlib import Path

APP_PATH = Path(__file__).resolve().parent.parent / "med_terms" / "web_ui" / "app.py"


def build_env(config_path=None) -> dict:
    """Environment для процесу Streamlit"""
    env = os.environ.copy()
    if config_path:
        env["MED_TERMS_CONFIG"] = str(Path(config_path).resolve())
    return env


def build_command(host: str, port: int) -> list:
    return [
        sys.executable, "-m", "streamlit", "run", str(APP_PATH),
        "--server.address", host,
        "--server.port", str(port),
        "--browser.gatherUsageStats", "false",
    ]


def main():
    parser = argparse.ArgumentParser(description='MedTerms Web UI')
    parser.add_argument('--host', default='localhost', help='Host (default: localhost)')
    parser.add_argument('--port', type=int, default=8501, help='Port (default: 8501)')
    parser.add_argument('--config', default=None, help='YAML config file')
    args = parser.parse_args()

    env = build_env(args.config)
    if not env.get("SUPABASE_URL") and not env.get("MED_TERMS_CONFIG"):
        print("⚠️  SUPABASE_URL не задано: пошук завершуватиметься помилкою")

    print(f"❤️ MedTerms → http://{args.host}:{args.port}")

    try:
        subprocess.run(build_command(args.host, args.port), env=env)
    except KeyboardInterrupt:
        print("\n🛑 Зупинено")


if __name__ == "__main__":
    main()
