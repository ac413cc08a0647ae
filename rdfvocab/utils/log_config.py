# -----------------------------------------------------------------------------
# MIT License
#
# Copyright (c) 2024 rdfvocab Team
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
# -----------------------------------------------------------------------------

"""Logger configuration."""
import logging
import logging.config
import sys
from pathlib import Path

import rdfvocab
from rdfvocab.utils import oplogging

logger = logging.getLogger(__name__)


def _try_load(fn):
    logging.config.fileConfig(fn, disable_existing_loggers=False)
    logger.debug("Loaded log config: %s", fn)


def setup_logging(config_file="rdfvocab/logging.conf"):
    """Setup logging.

    The file is looked up relative to the working directory first, then relative to the installed package.

    Args:
        config_file (str): Filepath of the logging configuration.
    """
    logging.TRACE = oplogging.TRACE

    try:
        _try_load(Path(config_file).resolve())
    except (KeyError, FileNotFoundError):  # pragma: no cover
        try:
            _try_load(Path(rdfvocab.__path__[0], "..", config_file).resolve())
        except (KeyError, FileNotFoundError):
            print("Warning: could not find %s" % config_file, file=sys.stderr)
