##
# .encodings - text encodings of PostgreSQL types
##
