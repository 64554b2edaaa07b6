"""Allows ``python -m argguard``."""

import sys

from argguard.cli import main

sys.exit(main())
