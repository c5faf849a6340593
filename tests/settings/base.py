"""Base Django settings for tests."""

SECRET_KEY = "django_tests_secret_key"

INSTALLED_APPS = [
    "django.contrib.contenttypes",
]

USE_TZ = False

# Overridden per test with the container address where a live server is needed.
CACHES = {
    "default": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": "redis://127.0.0.1:6379?db=1",
        "OPTIONS": {"client_class": "django_zsetproto.client.RedisSortedSetClient"},
    },
    "doesnotexist": {
        "BACKEND": "django.core.cache.backends.redis.RedisCache",
        "LOCATION": "redis://127.0.0.1:56379?db=1",
        "OPTIONS": {
            "ignore_exceptions": True,
            "log_ignored_exceptions": True,
        },
    },
}
