"""
中央日志配置

日志全部写入 logs/banqi.log；终端只输出警告及以上，
避免 DEBUG 日志混进命令行的 --json 输出。
"""

import sys
from pathlib import Path

from loguru import logger

# 路径常量
PROJECT_ROOT = Path(__file__).parent.parent
RUNTIME_LOGS_DIR = PROJECT_ROOT / "logs"
LOG_FILE = RUNTIME_LOGS_DIR / "banqi.log"
CONSOLE_LEVEL = "WARNING"

RUNTIME_LOGS_DIR.mkdir(parents=True, exist_ok=True)

# 去掉 loguru 默认的 stderr DEBUG 输出
logger.remove()

# 每次写入时再取 sys.stderr，测试替换 stderr 后也能捕获
logger.add(
    lambda message: sys.stderr.write(message),
    level=CONSOLE_LEVEL,
    format="{level}: {message}",
)

logger.add(
    LOG_FILE,
    rotation="10 MB",
    retention="7 days",
    level="DEBUG",
)

__all__ = ["logger", "RUNTIME_LOGS_DIR", "LOG_FILE", "CONSOLE_LEVEL"]
