"""
Пакет escp-label
================

Кодировщик команд ESC/P для этикеточных принтеров Brother QL (режим ESC/P).

Этот пакет предоставляет:
    - Кодирование стилизованного текста (шрифт, размер, жирный, курсив,
      подчёркивание, выравнивание, межсимвольный интервал)
    - Кодирование штрихкодов (CODE39, ITF, EAN, UPC, CODABAR, CODE128,
      GS1-128, RSS, CODE93, POSTNET, MSI)
    - Сборку задания печати (инициализация, ориентация, формат страницы,
      поля, отрезка бумаги, перевод формата)
    - Консольную утилиту escp-label для записи задания в файл

Пример базового использования:
    >>> from escp_label import (
    ...     TextEncoder, BarcodeEncoder, PrintJobAssembler,
    ...     StyleOptions, BarcodeOptions, JobOptions, BarcodeType, get_logger,
    ... )
    >>>
    >>> logger = get_logger(__name__)
    >>> text = TextEncoder().encode_columns("Hello", "World", StyleOptions(24))
    >>> code = BarcodeEncoder().encode("123456789", BarcodeOptions(BarcodeType.CODE128))
    >>> job = PrintJobAssembler().assemble([text, code], JobOptions(cut_paper=True))
    >>> logger.info("Сгенерировано %d байт ESC/P-команд", len(job))

Управление конфигурацией:
    >>> import os
    >>> os.environ['ESCP_LABEL_LOG_LEVEL'] = 'DEBUG'
    >>>
    >>> from escp_label import load_config
    >>> config = load_config()
    >>> config["text_encoding"]
    'ascii'

Версия: 0.1.0
Лицензия: MIT
Python: 3.11+
"""

import json
import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any, Dict, Optional

# =============================================================================
# МЕТАДАННЫЕ ВЕРСИИ
# =============================================================================

__version__ = "0.1.0"
__author__ = "escp-label Development Team"
__description__ = "ESC/P command encoder for Brother QL label printers"
__license__ = "MIT"
__python_requires__ = ">=3.11"

# Компоненты семантической версии
VERSION_MAJOR = 0
VERSION_MINOR = 1
VERSION_PATCH = 0

# =============================================================================
# ПРОВЕРКА ВЕРСИИ PYTHON
# =============================================================================

if sys.version_info < (3, 11):
    raise RuntimeError(
        f"escp-label требует Python 3.11 или выше. "
        f"Текущая версия: {sys.version_info.major}."
        f"{sys.version_info.minor}.{sys.version_info.micro}"
    )

# =============================================================================
# КОНФИГУРАЦИЯ ЛОГИРОВАНИЯ
# =============================================================================

LOGGER_NAMESPACE = "escp_label"
LOG_LEVEL_ENV = "ESCP_LABEL_LOG_LEVEL"
LOG_FILE_ENV = "ESCP_LABEL_LOG_FILE"

_LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_log_level(name: Any, default: int = logging.INFO) -> int:
    """Преобразовать имя уровня ('debug', 'INFO', ...) в константу logging."""
    if not isinstance(name, str) or not name:
        return default
    return _LOG_LEVELS.get(name.upper(), default)


def _setup_logging() -> None:
    """
    Инициализировать общепакетную конфигурацию логирования.

    Настраивает логгер пакета с:
    - Консольным обработчиком (stderr) для WARNING и выше
    - Ротирующим файловым обработчиком для всех уровней, если задана
      переменная окружения ESCP_LABEL_LOG_FILE
    - Форматом с временной меткой, уровнем, модулем и сообщением

    Уровень логирования задаётся переменной окружения
    ESCP_LABEL_LOG_LEVEL (DEBUG, INFO, WARNING, ERROR, CRITICAL).

    Функция идемпотентна - повторные вызовы не имеют эффекта.
    """
    package_logger = logging.getLogger(LOGGER_NAMESPACE)
    if package_logger.handlers:
        return

    log_level = resolve_log_level(os.environ.get(LOG_LEVEL_ENV))
    package_logger.setLevel(log_level)

    formatter = logging.Formatter(
        fmt="[%(asctime)s] %(levelname)-8s [%(name)s.%(funcName)s:%(lineno)d] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.WARNING)
    console_handler.setFormatter(formatter)
    package_logger.addHandler(console_handler)

    log_file = os.environ.get(LOG_FILE_ENV)
    if log_file:
        try:
            log_path = Path(log_file)
            log_path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.handlers.RotatingFileHandler(
                filename=log_path,
                maxBytes=10 * 1024 * 1024,  # 10 МБ
                backupCount=5,
                encoding="utf-8",
            )
            file_handler.setLevel(log_level)
            file_handler.setFormatter(formatter)
            package_logger.addHandler(file_handler)
        except OSError as e:
            package_logger.warning(
                "Не удалось инициализировать файловое логирование: %s. "
                "Используется только консоль.",
                e,
            )


def get_logger(module_name: str) -> logging.Logger:
    """
    Получить логгер в пространстве имён пакета.

    Имена вне пространства 'escp_label' получают префикс 'escp_label.';
    '__main__' отображается в 'escp_label.main'.

    Аргументы:
        module_name: Обычно `__name__` вызывающего модуля.

    Пример:
        >>> get_logger("plugin").name
        'escp_label.plugin'
    """
    if module_name == LOGGER_NAMESPACE or module_name.startswith(LOGGER_NAMESPACE + "."):
        return logging.getLogger(module_name)
    if module_name == "__main__":
        return logging.getLogger(f"{LOGGER_NAMESPACE}.main")
    clean_name = module_name.lstrip(".")
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{clean_name}")


# =============================================================================
# УПРАВЛЕНИЕ КОНФИГУРАЦИЕЙ
# =============================================================================

from escp_label.model.enums import DEFAULT_TEXT_ENCODING  # noqa: E402

# Значения конфигурации по умолчанию; тип каждого значения обязателен и для
# пользовательского файла
_DEFAULT_CONFIG: Dict[str, Any] = {
    "log_level": "INFO",
    "text_encoding": DEFAULT_TEXT_ENCODING,
    "cut_paper": False,
    "landscape": False,
    "carriage_return": False,
}


def _drop_mistyped_values(config: Dict[str, Any], logger: logging.Logger) -> None:
    """Заменить значения неверного типа значениями по умолчанию (с предупреждением)."""
    for key, default in _DEFAULT_CONFIG.items():
        value = config[key]
        # bool - подкласс int, поэтому сравнивается точный тип
        if type(value) is not type(default):
            logger.warning(
                "Недопустимое значение %r для ключа '%s': ожидается %s. "
                "Используется значение по умолчанию %r.",
                value,
                key,
                type(default).__name__,
                default,
            )
            config[key] = default

def load_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """
    Загрузить конфигурацию из JSON-файла поверх значений по умолчанию.

    Ключи конфигурации:
        - log_level: str - Уровень логирования консольной утилиты
        - text_encoding: str - Кодек для текста (по умолчанию ascii)
        - cut_paper: bool - Отрезать бумагу после печати
        - landscape: bool - Альбомная ориентация
        - carriage_return: bool - Завершать текстовые строки CR

    Аргументы:
        config_path: Путь к файлу. Если None, ищется 'config.json' в
                    текущем каталоге.

    Возвращает:
        Новый словарь со всеми ключами по умолчанию; значения из файла
        переопределяют их. При отсутствии файла или ошибке разбора
        возвращаются значения по умолчанию (с предупреждением в логе);
        значение неверного типа заменяется значением по умолчанию.
    """
    logger = get_logger(__name__)

    if config_path is None:
        config_path = Path("config.json")
    config_path = Path(config_path)

    config = _DEFAULT_CONFIG.copy()

    if not config_path.exists():
        logger.info(
            "Файл конфигурации %s не найден. Используется конфигурация по умолчанию.",
            config_path,
        )
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            user_config = json.load(f)

        if not isinstance(user_config, dict):
            raise ValueError(
                f"Файл конфигурации должен содержать JSON-объект, "
                f"получен {type(user_config).__name__}"
            )

        config.update(user_config)
        _drop_mistyped_values(config, logger)
        logger.info("Конфигурация загружена из %s", config_path)
        logger.debug("Конфигурация: %s", config)

    except json.JSONDecodeError as e:
        logger.warning(
            "Не удалось разобрать %s: недопустимый JSON в строке %d, столбце %d. "
            "Используется конфигурация по умолчанию.",
            config_path,
            e.lineno,
            e.colno,
        )
    except OSError as e:
        logger.warning(
            "Не удалось прочитать %s: %s. Используется конфигурация по умолчанию.",
            config_path,
            e,
        )
    except ValueError as e:
        logger.warning(
            "Недопустимый формат конфигурации: %s. Используется конфигурация по умолчанию.",
            e,
        )

    return config


# =============================================================================
# ПУБЛИЧНЫЙ API
# =============================================================================

# Импорты размещены после утилит логирования, чтобы модули пакета
# получали уже настроенный логгер.

from escp_label.escp import (  # noqa: E402
    BarcodeEncoder,
    PrintJobAssembler,
    TextEncoder,
    escape_non_printable,
    hex_dump,
)
from escp_label.model import (  # noqa: E402
    Alignment,
    BarcodeOptions,
    BarcodeRatio,
    BarcodeType,
    BarcodeWidth,
    Bold,
    FontType,
    InvalidArgumentError,
    Italic,
    JobOptions,
    Spacing,
    StyleOptions,
    Underline,
)

__all__ = [
    # Метаданные версии
    "__version__",
    "__author__",
    "__description__",
    "__license__",
    "__python_requires__",
    "VERSION_MAJOR",
    "VERSION_MINOR",
    "VERSION_PATCH",
    # Утилиты
    "get_logger",
    "load_config",
    "resolve_log_level",
    # Кодировщики
    "TextEncoder",
    "BarcodeEncoder",
    "PrintJobAssembler",
    "escape_non_printable",
    "hex_dump",
    # Параметры
    "StyleOptions",
    "BarcodeOptions",
    "JobOptions",
    "InvalidArgumentError",
    # Перечисления
    "FontType",
    "Bold",
    "Italic",
    "Underline",
    "Alignment",
    "Spacing",
    "BarcodeType",
    "BarcodeWidth",
    "BarcodeRatio",
]

# =============================================================================
# ИНИЦИАЛИЗАЦИЯ ПАКЕТА
# =============================================================================

_setup_logging()
get_logger(__name__).debug("escp-label v%s инициализирован", __version__)
