"""Route template constants."""

# Reserved key token. Single-key entities always use it as their placeholder,
# and described parameters starting with it (case-insensitive) are key
# parameters.
KEY_TOKEN = "key"

PATH_SEPARATOR = "/"
KEY_SEPARATOR = ","
QUERY_SEPARATOR = "&"
