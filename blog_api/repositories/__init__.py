# Repositories package.
#
# Store adapters: thin async functions over an AsyncSession that perform
# key-indexed lookup / save / delete plus the scans each service needs.
#
#   category_repository : Category by id, all categories
#   post_repository     : Post by id, paginated + sorted scan, by category
#   comment_repository  : Comment by id, by parent post
#
# Adapters flush but never commit; the ``get_db`` dependency owns the
# transaction.  They raise nothing of their own: a missing row is None.
