# --*-- coding:utf-8 --*--
# @time:10/16/26 11:05
# @File:__main__.py

import sys

from .cli import main

sys.exit(main())
