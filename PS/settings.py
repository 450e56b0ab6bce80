# PS/settings.py
# ─────────────────────────────────────────────────────────────────────────────
# Путь и имя файла: PS/settings.py
# Назначение: глобальные настройки проекта Django + настройки постраничной навигации
# Принципы: значения берём из окружения (.env), тулбар подключаем только при DEBUG,
# ─────────────────────────────────────────────────────────────────────────────

from pathlib import Path  # стандартный модуль для работы с путями (Path-объект)
import os                 # модуль для чтения переменных окружения и работы с ОС
import socket             # модуль нужен для вычисления INTERNAL_IPS (Docker/WSL кейсы)
from dotenv import load_dotenv  # загрузка значений из .env

# BASE_DIR — корень проекта. Используем для формирования других путей.
BASE_DIR = Path(__file__).resolve().parent.parent

# ── Быстрая стартовая секция (важное для безопасности) ───────────────────────

# Подгружаем файл окружения .env, расположенный в корне проекта
load_dotenv(BASE_DIR / ".env")

# Флаг режима разработки. В продакшене должен быть False.
DEBUG = os.getenv("PS_DEBUG", "1") == "1"

# Секретный ключ берём из переменной окружения PS_SECRET_KEY; в Dev допускаем встроенный
SECRET_KEY = os.getenv("PS_SECRET_KEY") or ("dev-only-insecure-key" if DEBUG else "")

# Если ключ не найден вне Dev, сразу падаем с понятной ошибкой — без него запуск небезопасен
if not SECRET_KEY:
    raise ValueError("❌ SECRET_KEY не найден в .env! Установите PS_SECRET_KEY.")

# Список разрешённых хостов через запятую. В Dev можно оставить пустым.
ALLOWED_HOSTS: list[str] = [h.strip() for h in os.getenv("PS_ALLOWED_HOSTS", "").split(",") if h.strip()]

# ── Приложения проекта ───────────────────────────────────────────────────────

INSTALLED_APPS = [
    "django.contrib.admin",            # админка Django
    "django.contrib.auth",             # система аутентификации
    "django.contrib.contenttypes",     # контент-тайпы (связаны с моделями)
    "django.contrib.sessions",         # сессии
    "django.contrib.messages",         # сообщения (flash-сообщения)
    "django.contrib.staticfiles",      # работа со статикой
    "rest_framework",                  # DRF — API фреймворк
    "pageseries",                      # постраничная навигация (ядро + теги + DRF-пагинация)
    "catalog",                         # демонстрационный каталог
    # "debug_toolbar" — подключим ниже условно, чтобы в проде не торчал
]

# Опциональный флажок для включения тулбара (по умолчанию выключен, в т.ч. для тестов)
ENABLE_DEBUG_TOOLBAR = os.getenv("ENABLE_DEBUG_TOOLBAR", "0") == "1"

# Подключим debug_toolbar только в режиме разработки и если включён переменной
if DEBUG and ENABLE_DEBUG_TOOLBAR:
    INSTALLED_APPS += ["debug_toolbar"]  # добавляем приложение тулбара

# ── Middleware ───────────────────────────────────────────────────────────────

MIDDLEWARE = [
    "django.middleware.security.SecurityMiddleware",        # базовая безопасность
    "django.contrib.sessions.middleware.SessionMiddleware", # поддержка сессий
    "django.middleware.locale.LocaleMiddleware",            # язык из запроса (подписи навигации)
    "django.middleware.common.CommonMiddleware",            # общие улучшения (ETag и пр.)
    "django.middleware.csrf.CsrfViewMiddleware",            # защита от CSRF
    "django.contrib.auth.middleware.AuthenticationMiddleware",  # аутентификация пользователя
    "django.contrib.messages.middleware.MessageMiddleware",     # флеш-сообщения
    "django.middleware.clickjacking.XFrameOptionsMiddleware",   # защита от clickjacking
]

# Если тулбар включён — вставляем его middleware сразу после SecurityMiddleware
if DEBUG and ENABLE_DEBUG_TOOLBAR:
    _dt_mw = "debug_toolbar.middleware.DebugToolbarMiddleware"  # название middleware тулбара
    sec_idx = MIDDLEWARE.index("django.middleware.security.SecurityMiddleware")
    MIDDLEWARE.insert(sec_idx + 1, _dt_mw)  # вставляем на нужную позицию (рекомендация Django)

# ── Урлы и WSGI ──────────────────────────────────────────────────────────────

ROOT_URLCONF = "PS.urls"              # корневой файл с маршрутами

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",  # бэкенд движка шаблонов
        "DIRS": [BASE_DIR / "templates"],  # дополнительная папка с шаблонами проекта
        "APP_DIRS": True,                  # включаем поиск шаблонов в приложениях
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",  # добавляет request в контекст (нужен тегам навигации)
                "django.contrib.auth.context_processors.auth", # добавляет user/permissions
                "django.contrib.messages.context_processors.messages",  # для messages
            ],
        },
    },
]

WSGI_APPLICATION = "PS.wsgi.application"  # точка входа WSGI-сервера

# ── База данных ──────────────────────────────────────────────────────────────
# SQLite для разработки; путь можно переопределить переменной PS_DB_PATH.
DATABASES = {
    "default": {
        "ENGINE": "django.db.backends.sqlite3",                          # движок БД
        "NAME": os.getenv("PS_DB_PATH") or BASE_DIR / "db.sqlite3",     # путь до файла SQLite
        "CONN_MAX_AGE": 60,  # удерживаем коннект некоторое время (секунды)
    }
}

# ── Валидаторы паролей ──────────────────────────────────────────────────────

AUTH_PASSWORD_VALIDATORS = [
    {"NAME": "django.contrib.auth.password_validation.UserAttributeSimilarityValidator"},  # проверка на похожесть
    {"NAME": "django.contrib.auth.password_validation.MinimumLengthValidator"},            # минимальная длина
    {"NAME": "django.contrib.auth.password_validation.CommonPasswordValidator"},           # запрет частых паролей
    {"NAME": "django.contrib.auth.password_validation.NumericPasswordValidator"},          # запрет чисто цифровых
]

# ── Локализация и часовой пояс ──────────────────────────────────────────────

LANGUAGE_CODE = os.getenv("PS_LANGUAGE_CODE", "en-us")  # язык интерфейса (подписи навигации идут через gettext)
TIME_ZONE = os.getenv("PS_TIME_ZONE", "Europe/Moscow")  # часовой пояс проекта
USE_I18N = True               # поддержка интернационализации
USE_TZ = True                 # хранить даты/время в БД в UTC (рекомендовано)
LOCALE_PATHS = [BASE_DIR / "locale"]  # переводы проекта (msgid с контекстом "pageseries")

# ── Статика ─────────────────────────────────────────────────────────────────

STATIC_URL = "static/"                 # URL-префикс для статики

# ── Первичный ключ по умолчанию ─────────────────────────────────────────────

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"  # тип авто-поля id

# ── DRF: базовые безопасные настройки ────────────────────────────────────────
REST_FRAMEWORK = {
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",  # JSON рендерер
        "rest_framework.renderers.BrowsableAPIRenderer",  # удобно при разработке
    ],
    "DEFAULT_PAGINATION_CLASS": "pageseries.pagination.SeriesPagination",  # пагинация с серией и заголовками Link
}

# ── Постраничная навигация: дефолты для всех Page ───────────────────────────
# Любые имена из pageseries.services.pagination.PageVars; значения per-call перекрывают эти.
PAGESERIES = {
    "items": int(os.getenv("PAGESERIES_ITEMS", "20")),  # элементов на странице
    "size": int(os.getenv("PAGESERIES_SIZE", "7")),     # ширина центрального окна
}

# ── Логирование ─────────────────────────────────────────────────────────────
LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "plain": {"format": "%(asctime)s %(levelname)s %(name)s: %(message)s"},
    },
    "handlers": {
        "console": {"class": "logging.StreamHandler", "formatter": "plain"},
    },
    "loggers": {
        "pageseries": {"handlers": ["console"], "level": os.getenv("PAGESERIES_LOG_LEVEL", "INFO")},
        "catalog": {"handlers": ["console"], "level": os.getenv("PAGESERIES_LOG_LEVEL", "INFO")},
    },
}

# ── Django Debug Toolbar: INTERNAL_IPS и конфигурация ───────────────────────

if DEBUG and ENABLE_DEBUG_TOOLBAR:
    # INTERNAL_IPS определяет, с каких IP показывать тулбар.
    INTERNAL_IPS = ["127.0.0.1", "localhost", "::1"]  # базовые локальные значения

    # Дополнительная «магия» для Docker/WSL — вычисляем подсеть и подставляем *.1
    try:
        hostname, _, ips = socket.gethostbyname_ex(socket.gethostname())  # получаем список IP
        INTERNAL_IPS += [ip[:-1] + "1" for ip in ips if "." in ip]        # 172.17.0.X -> 172.17.0.1
    except OSError:
        pass  # если не получилось — ничего страшного

    # Уберём дубликаты, сохраняя порядок
    INTERNAL_IPS = list(dict.fromkeys(INTERNAL_IPS))

    DEBUG_TOOLBAR_CONFIG = {
        "SHOW_COLLAPSED": True,  # панели свёрнуты по умолчанию
    }
