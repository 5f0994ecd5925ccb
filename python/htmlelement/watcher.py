# SPDX-License-Identifier: MIT
import sys
import time
from pathlib import Path

from watchdog.events import FileSystemEventHandler
from watchdog.observers import Observer

from .builder import cmd_build
from .config import Config


class BuildEventHandler(FileSystemEventHandler):
    def __init__(self, args, root, ignore=(), delay=0.5, build=cmd_build):
        self.args = args
        self.root = Path(root).resolve()
        self.ignore = {Path(p).resolve() for p in ignore}
        self.delay = delay
        self.build = build
        self.last_build = 0

    def on_modified(self, event):
        if event.is_directory:
            return

        src = Path(event.src_path).resolve()
        # Hidden files and the build output itself
        try:
            parts = src.relative_to(self.root).parts
        except ValueError:
            parts = src.parts
        if any(part.startswith(".") for part in parts):
            return
        if src in self.ignore:
            return

        # Debounce
        now = time.time()
        if now - self.last_build < self.delay:
            return

        sys.stdout.write(f"[watch] Change detected in {event.src_path}...\n")
        try:
            self.build(self.args)
        except Exception as e:
            sys.stderr.write(f"[error] Build failed: {e}\n")

        self.last_build = now


def watch(args):
    """Watch the project directory and trigger builds on change."""
    config = Config.load(Path(args.config) if args.config else None)
    out_path = Path(args.out) if getattr(args, "out", None) else config.get_output_path()

    sys.stdout.write(f"[watch] Watching {config.root} for changes...\n")

    try:
        cmd_build(args)
    except Exception as e:
        sys.stderr.write(f"[error] Initial build failed: {e}\n")

    event_handler = BuildEventHandler(args, config.root, ignore=[out_path])
    observer = Observer()
    observer.schedule(event_handler, str(config.root), recursive=True)
    observer.start()

    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        observer.stop()
    observer.join()
