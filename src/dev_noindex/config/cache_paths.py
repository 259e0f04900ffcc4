# Literal cache locations, relative to the home directory, per fixed-path group.

EDITOR_CACHE_PATHS: tuple[str, ...] = (
    "Library/Application Support/Code/Cache",
    "Library/Application Support/Code/CachedData",
    "Library/Application Support/Code/CachedExtensionVSIXs",
    "Library/Application Support/Code/User/workspaceStorage",
    "Library/Application Support/Cursor/Cache",
    "Library/Application Support/Cursor/CachedData",
    "Library/Application Support/Zed/languages",
    "Library/Caches/JetBrains",
    ".vscode/extensions",
    ".cursor/extensions",
)

BROWSER_CACHE_PATHS: tuple[str, ...] = (
    "Library/Caches/Google/Chrome",
    "Library/Caches/com.google.Chrome",
    "Library/Caches/BraveSoftware/Brave-Browser",
    "Library/Caches/Firefox",
    "Library/Caches/Microsoft Edge",
    "Library/Caches/company.thebrowser.Browser",
    "Library/Caches/com.apple.Safari",
)

DOCKER_CACHE_PATHS: tuple[str, ...] = (
    "Library/Containers/com.docker.docker/Data",
    "Library/Group Containers/group.com.docker",
    ".docker",
)

ORBSTACK_CACHE_PATHS: tuple[str, ...] = (".orbstack",)

GLOBAL_CACHE_PATHS: tuple[str, ...] = ("Library/Caches",)

__all__ = [
    "BROWSER_CACHE_PATHS",
    "DOCKER_CACHE_PATHS",
    "EDITOR_CACHE_PATHS",
    "GLOBAL_CACHE_PATHS",
    "ORBSTACK_CACHE_PATHS",
]
