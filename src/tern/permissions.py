"""Permission gate — decides whether a sender may use a route.

Three tiers, higher privilege subsumes lower::

    env-admin  >  owner  >  admin

A route is eligible only if every flag it sets is satisfied. Context
queries may hit a remote API, so each query is made at most once and
only when a flag actually needs it.
"""

from tern.context import MessengerContext
from tern.routing.route import Route


def can_access(route: Route, context: MessengerContext) -> bool:
    """Return True if the sender behind *context* may invoke *route*."""
    if not (route.require_env_admin or route.require_owner or route.require_admin):
        return True

    env_admin = context.is_sender_env_admin()
    if route.require_env_admin and not env_admin:
        return False
    if env_admin:
        return True

    owner = context.is_sender_owner()
    if route.require_owner and not owner:
        return False
    if owner or not route.require_admin:
        return True

    return context.is_sender_admin()
