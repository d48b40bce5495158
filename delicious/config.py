# config.py
import os

class Config:
    LOG_LEVEL = os.environ.get('DELICIOUS_LOG_LEVEL') or 'INFO'
    DATETIME_FORMAT = os.environ.get('DELICIOUS_DATETIME_FORMAT') or '%Y-%m-%dT%H:%M:%SZ'
    TAG_SEPARATOR = ' '
