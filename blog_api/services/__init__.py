# Services package.
#
# Each module exposes a focused set of async functions that encapsulate
# the business rules for a single resource:
#
#   category_service : CRUD for Category
#   post_service     : CRUD + pagination / sorting + by-category for Post
#   comment_service  : CRUD for Comment, always scoped to a parent Post
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  Failures are raised as ``blog_api.exceptions``
# types; nothing is returned as None.
