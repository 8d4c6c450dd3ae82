# src/login_dfa/utils/logger.py
import logging, os
LOG_DIR = os.environ.get("LOGIN_DFA_LOG_DIR") or os.path.join(os.path.dirname(__file__), "..", "logs")

def get_logger(name="login_dfa", log_dir=None, level=None):
    path = os.path.abspath(os.path.join(log_dir or LOG_DIR, "login_dfa.log"))
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(level)
    current = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    if log_dir is None and current:
        return logger
    if any(h.baseFilename == path for h in current):
        return logger
    # a single file handler; a new log_dir replaces the old one
    for h in current:
        logger.removeHandler(h)
        h.close()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    if level is None and logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    fh = logging.FileHandler(path)
    fmt = logging.Formatter('%(asctime)s %(levelname)s: %(message)s')
    fh.setFormatter(fmt)
    logger.addHandler(fh)
    return logger
