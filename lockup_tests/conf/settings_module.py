SETTINGS = dict(
    NETWORK_NAME='from-module',
    DEFAULT_WORKCHAIN=-1,
)
