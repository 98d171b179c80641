from avsim.ui.console import run_app

raise SystemExit(run_app())
