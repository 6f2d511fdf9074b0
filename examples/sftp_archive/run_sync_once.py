"""
Run one sync pass for the demo config without the CLI.
"""

from __future__ import annotations

from pathlib import Path

from sftpsync import SyncSettings, load_config, open_session, run_sync, setup_logging


def main() -> None:
    project_dir = Path(__file__).parent
    settings = SyncSettings.from_config(load_config(project_dir / "config.yaml"))
    setup_logging(level="DEBUG" if settings.verbose else "INFO")

    with open_session(settings.connection_url(), settings) as session:
        result = run_sync(session, settings)
    print(result.as_dict())


if __name__ == "__main__":
    main()
