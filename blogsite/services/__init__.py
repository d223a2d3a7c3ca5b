# Services package.
#
#   blog_service  - BlogService: post lookups, visibility-filtered
#                   listings and pagination metadata over a PostStore
#   excerpt       - first-paragraph excerpts for list views
#
# BlogService receives its PostStore through the constructor; the HTTP
# layer builds one per request over the ``get_db`` session so the router
# controls the transaction boundary.
