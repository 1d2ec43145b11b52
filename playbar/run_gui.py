import argparse
import faulthandler
import logging
import os
import sys
import threading
import traceback
from datetime import datetime
from pathlib import Path

from PySide6.QtCore import QtMsgType, qInstallMessageHandler
from PySide6.QtWidgets import QApplication, QMainWindow, QMessageBox

from playbar.skins.engine import SkinManager
from playbar.utils.settings import (get_player_skin, get_skin_directories,
                                    settings)
from playbar.widgets.playback_widget import PlaybackWidget

logger = logging.getLogger(__name__)

CRASH_LOG_PATH = os.path.abspath('playbar_crash.log')
FATAL_LOG_PATH = os.path.abspath('playbar_fatal.log')
_fatal_log_handle = None
ENABLE_FATAL_CRASH_DUMPS = os.getenv('PLAYBAR_ENABLE_FAULTHANDLER', '0') == '1'


_QT_LOG_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}


def qt_message_handler(msg_type, msg_context, msg_string):
    """Suppress Qt's QPainter debug messages; log the rest at their own level."""
    if "QPainter" in msg_string or "Paint device returned engine" in msg_string:
        return
    logger.log(_QT_LOG_LEVELS.get(msg_type, logging.WARNING), "[Qt] %s", msg_string)


def _append_crash_log(title: str, exc_info=None):
    """Append a timestamped crash entry to the crash log."""
    ts = datetime.now().strftime('%Y-%m-%d %H:%M:%S')
    try:
        with open(CRASH_LOG_PATH, 'a', encoding='utf-8') as f:
            f.write("\n" + "=" * 80 + "\n")
            f.write(f"{ts} | {title}\n")
            f.write("=" * 80 + "\n")
            if exc_info is None:
                f.write(traceback.format_exc())
            else:
                f.writelines(traceback.format_exception(*exc_info))
            f.write("\n")
    except OSError as log_error:
        logger.error("Failed to write crash log: %s", log_error)
    logger.error("Crash details written to: %s", CRASH_LOG_PATH)


def install_crash_handlers():
    """Install Python/thread crash handlers; fatal dumps are opt-in."""
    global _fatal_log_handle
    if _fatal_log_handle is not None:
        return

    def _unhandled_exception(exc_type, exc_value, exc_traceback):
        _append_crash_log("UNHANDLED EXCEPTION", (exc_type, exc_value, exc_traceback))
        sys.__excepthook__(exc_type, exc_value, exc_traceback)

    def _thread_exception(args):
        thread_name = getattr(args.thread, 'name', 'unknown')
        _append_crash_log(
            f"THREAD EXCEPTION ({thread_name})",
            (args.exc_type, args.exc_value, args.exc_traceback),
        )

    sys.excepthook = _unhandled_exception
    threading.excepthook = _thread_exception

    if ENABLE_FATAL_CRASH_DUMPS:
        try:
            _fatal_log_handle = open(FATAL_LOG_PATH, 'a', encoding='utf-8', buffering=1)
            _fatal_log_handle.write(
                "\n" + "=" * 80 + "\n"
                f"{datetime.now().isoformat()} | SESSION START pid={os.getpid()}\n"
                + "=" * 80 + "\n"
            )
            faulthandler.enable(file=_fatal_log_handle, all_threads=True)
            logger.info("Fatal trace dumps enabled: %s", FATAL_LOG_PATH)
        except OSError as e:
            logger.warning("Could not enable faulthandler: %s", e)


def configure_logging():
    """Verbose logging in development, warnings only otherwise."""
    environment = os.getenv('PLAYBAR_ENVIRONMENT')
    level = logging.DEBUG if environment == 'development' else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    if environment == 'development':
        logger.info('Running in development environment.')


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Play a video with transport controls")
    p.add_argument("media", nargs="?", default="", help="Video or audio file to open")
    p.add_argument("--loop", action="store_true",
                   help="Loop playback instead of offering REPLAY at the end")
    p.add_argument("--skin", type=str, default="", help="Skin name (defaults to the saved one)")
    return p.parse_args(argv)


def build_skin_manager() -> SkinManager:
    base_dir = Path(__file__).parent / 'skins'
    skin_dirs = [base_dir / 'defaults', base_dir / 'user']
    skin_dirs.extend(Path(path) for path in get_skin_directories())
    return SkinManager(skin_dirs)


def run_gui(argv=None) -> int:
    args = parse_args(argv)

    os.environ['QT_LOGGING_RULES'] = '*.debug=false;qt.multimedia*=false'
    qInstallMessageHandler(qt_message_handler)

    app = QApplication(sys.argv[:1])
    app.setApplicationName('playbar')
    app.setApplicationDisplayName('playbar')
    app.setStyle('Fusion')

    skin_manager = build_skin_manager()
    skin_name = args.skin or get_player_skin()
    if not skin_manager.load_skin_or_default(skin_name):
        logger.warning("No skins available, using built-in defaults")
    elif args.skin:
        settings.setValue('player_skin', skin_manager.get_current_skin_name())

    window = QMainWindow()
    playback_widget = PlaybackWidget(
        skin_applier=skin_manager.get_current_applier(),
        loop_playback=True if args.loop else None,
    )
    window.setCentralWidget(playback_widget)
    window.resize(960, 600)

    if args.media:
        media_path = Path(args.media)
        window.setWindowTitle(media_path.name)
        if not playback_widget.load(media_path):
            QMessageBox.warning(window, 'Cannot open media',
                                playback_widget.player.error_string)

    app.aboutToQuit.connect(playback_widget.dispose)
    window.show()
    return int(app.exec())


def main():
    configure_logging()
    install_crash_handlers()
    try:
        sys.exit(run_gui())
    except Exception as exception:
        _append_crash_log("TOP-LEVEL EXCEPTION", sys.exc_info())
        error_message_box = QMessageBox()
        error_message_box.setWindowTitle('Error')
        error_message_box.setIcon(QMessageBox.Icon.Critical)
        error_message_box.setText(str(exception))
        error_message_box.setDetailedText(traceback.format_exc())
        error_message_box.exec()
        sys.exit(1)


if __name__ == '__main__':
    main()
