#!/usr/bin/env python3
"""
playbar launcher script.

Run this from the project root:
  python run_playbar.py path/to/video.mp4 [--loop] [--skin Midnight]
"""

if __name__ == '__main__':
    from playbar.run_gui import main
    main()
