import os
import sys
import glob
import logging
import tempfile
from logging.handlers import RotatingFileHandler


class LazyRotatingFileHandler(RotatingFileHandler):
    """
    Rotating log file kept in a private temporary directory. Neither the
    directory nor the file exist until the first record is emitted, so a
    process that never logs leaves nothing behind.

    A directory left by an earlier run is reused when it has the same prefix,
    belongs to the current user, has 0o700 permissions and holds no symlinks.
    """

    def __init__(self, tmpdir_prefix='', basename=None, *args, **kwargs):
        self.tmpdir_prefix = tmpdir_prefix
        self.base_dir = None
        basename = basename or f"log_{os.getpid()}.log"
        kwargs['filename'] = basename
        kwargs['delay'] = True
        super().__init__(*args, **kwargs)

    @staticmethod
    def _tmpdir_usable(path):
        st = os.stat(path)
        if st.st_uid != os.getuid() or (st.st_mode & 0o777) != 0o700:
            return False
        return not any(os.path.islink(os.path.join(path, item)) for item in os.listdir(path))

    @classmethod
    def _create_temp_dir(cls, tmpdir_prefix):
        if tmpdir_prefix:
            pattern = os.path.join(tempfile.gettempdir(), f"{tmpdir_prefix}*")
            for dir_ in glob.glob(pattern):
                if os.path.isdir(dir_) and cls._tmpdir_usable(dir_):
                    return dir_
        # mkdtemp already creates the directory with 0o700
        return tempfile.mkdtemp(prefix=tmpdir_prefix)

    def emit(self, record):
        if self.base_dir is None:
            self.base_dir = self._create_temp_dir(self.tmpdir_prefix)
            self.baseFilename = os.path.join(self.base_dir, os.path.basename(self.baseFilename))
        super().emit(record)


def setup_logger(prefix, name=None, level=logging.DEBUG):
    logger = logging.getLogger(name)
    logger.setLevel(level)
    handler = LazyRotatingFileHandler(tmpdir_prefix=prefix, maxBytes=10*(1024 ** 2), backupCount=3)
    logger.addHandler(handler)
    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setLevel(logging.WARNING)
    logger.addHandler(stderr_handler)
    return logger
