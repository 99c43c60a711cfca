# coding: utf-8

# Copyright (c) IPython Development Team.
# Distributed under the terms of the Modified BSD License.

import sys

from .diffapp import main


if __name__ == "__main__":
    # This is triggered by "python -m myersdiff <args>"
    sys.exit(main())
