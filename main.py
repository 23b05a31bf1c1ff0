#!/usr/bin/env python3
"""
LinguaAR - object vocabulary translations for AR camera detections
Runs one frame of detections through a session and prints the overlays.
"""

import argparse
import json
import logging
import sys

from PyQt6.QtCore import QCoreApplication

from linguaar.logging_config import setup_logger
from linguaar.models import Detection, ScreenRect, TargetLanguage
from linguaar.session import LinguaSession


def load_detections(path):
    """Read [{"category": ..., "confidence": ..., "rect": [x, y, w, h]}, ...]"""
    with open(path, "r", encoding="utf-8") as f:
        rows = json.load(f)
    return [
        Detection(category=row["category"], confidence=float(row["confidence"]), rect=ScreenRect(*row["rect"]))
        for row in rows
    ]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="LinguaAR translation overlay session")
    parser.add_argument("--detections", required=True, help="JSON file with one frame of detections")
    parser.add_argument("--language", choices=[lang.name.lower() for lang in TargetLanguage],
                        help="Switch (and persist) the target language")
    parser.add_argument("--focus", metavar="CATEGORY", help="Focus the overlay of this category")
    parser.add_argument("--speak", action="store_true", help="Pronounce the focused translation")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    return parser.parse_args(argv)


def main(argv=None):
    """Main application entry point"""
    args = parse_args(argv)
    setup_logger(level=logging.DEBUG if args.debug else logging.INFO)

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setOrganizationName("LinguaAR")
    app.setApplicationName("LinguaAR")

    session = LinguaSession()
    if args.language:
        session.set_language(TargetLanguage[args.language.upper()])

    session.process_frame(load_detections(args.detections))
    for overlay in session.board.visible_overlays():
        print(overlay.text.replace("\n", " | "))

    if args.focus:
        overlay = session.board.find(args.focus)
        if overlay is None:
            print(f"No overlay for '{args.focus}'")
        else:
            overlay.click()
            print(session.action_menu.title)
            print(session.action_menu.info)
            if args.speak:
                session.speech.speech_finished.connect(app.quit)
                session.speech.speech_failed.connect(lambda _error: app.quit())
                session.action_menu.pronounce()
                # worker results arrive as queued signals
                if session.speech.is_speaking():
                    app.exec()

    session.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
