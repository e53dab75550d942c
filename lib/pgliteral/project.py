'project information'

#: project name
name = 'pgliteral'
abstract = 'Codec for the text forms of PostgreSQL ARRAY and bytea values'

version_info = (1, 0, 0, 'final', 0)
version = '.'.join(map(str, version_info[:3])) + (
	version_info[3] != 'final' and (version_info[3] + str(version_info[4])) or ''
)
