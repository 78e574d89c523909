#!/usr/bin/env python3
"""Direct launcher for the Financial Charts app."""

import subprocess
import sys
from pathlib import Path

project_root = Path(__file__).parent.resolve()
app_path = project_root / "finance_charts" / "app.py"

if __name__ == "__main__":
    subprocess.run([sys.executable, "-m", "streamlit", "run", str(app_path)])
