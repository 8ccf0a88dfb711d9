APP_NAME = "symcache"

# Working directory entry that is replaced by a link into the cache
DEFAULT_LINK_NAME = "node_modules"
DEFAULT_MANIFEST = "package.json"
DEFAULT_INSTALL_COMMAND = "npm install"

# Number of cache entries kept per package identity
DEFAULT_CACHE_LIMIT = 5

# Written into an entry once its install completed
MARKER_FILENAME = ".symcache"
