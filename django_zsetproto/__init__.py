import re

VERSION = (1, 0, 0)
__version__ = ".".join(map(str, VERSION))

DEFAULT_CLIENT_CLASS = "django_zsetproto.client.RedisSortedSetClient"


def get_sorted_set_client(alias="default"):
    """Build a sorted set client from the ``CACHES`` entry named ``alias``.

    ``LOCATION`` gives the server URL(s), separated by ``,`` or ``;`` as in
    Django's cache backends. ``OPTIONS`` may name a ``client_class`` and a
    ``serializer``; everything else goes to the connection pool.
    """
    from django.conf import settings
    from django.core.exceptions import ImproperlyConfigured
    from django.utils.module_loading import import_string

    try:
        params = settings.CACHES[alias]
    except KeyError as e:
        raise ImproperlyConfigured(f"Could not find cache alias '{alias}' in CACHES") from e

    location = params.get("LOCATION", "")
    servers = re.split("[;,]", location) if isinstance(location, str) else list(location)
    if not servers or not servers[0]:
        raise ImproperlyConfigured(f"Cache alias '{alias}' has no LOCATION")

    options = dict(params.get("OPTIONS", {}))
    client_class = options.pop("client_class", DEFAULT_CLIENT_CLASS)
    if isinstance(client_class, str):
        client_class = import_string(client_class)
    return client_class(servers, **options)
