##
# .python - general Python tools used by pgliteral
##
