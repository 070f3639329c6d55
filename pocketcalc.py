"""
PocketCalc
Main application entry point
"""
import atexit
import os
import subprocess
import sys
import tkinter as tk
import config
from gui import PocketCalcGUI

API_SCRIPT = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'api.py')


def launch_web_portal():
    """Run api.py next to the GUI; returns the process, or None if it could not start"""
    try:
        process = subprocess.Popen(
            [sys.executable, API_SCRIPT],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
    except OSError as e:
        print(f"Failed to start API server: {e}")
        return None

    print(f"API server started (PID: {process.pid}) on port {config.WEB_PORT}")
    atexit.register(stop_web_portal, process)
    return process


def stop_web_portal(process):
    if process.poll() is not None:
        return
    process.terminate()
    try:
        process.wait(timeout=5)
    except subprocess.TimeoutExpired:
        process.kill()
    print("API server stopped")


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    portal = None
    if config.START_WEB_PORTAL or "--web" in argv:
        portal = launch_web_portal()

    root = tk.Tk()
    PocketCalcGUI(root)
    root.mainloop()

    if portal is not None:
        stop_web_portal(portal)


if __name__ == "__main__":
    main()
