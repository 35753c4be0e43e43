from __future__ import annotations

from api import run

if __name__ == "__main__":
    run(width=1280, height=800, fps=60)
