# Keys of the string valued metadata maps carried by Arrow schemas and fields

# column level, JSON encoded
LABELS_KEY = "labels"
CONFIG_KEY = "config"

# table level, name and refId stored as plain strings, meta JSON encoded
NAME_KEY = "name"
REF_ID_KEY = "refId"
META_KEY = "meta"

# envelope keys of a multi-result query response
RESULTS_KEY = "results"
DATAFRAMES_KEY = "dataframes"

# magic bytes opening an Arrow IPC file (as opposed to an IPC stream)
ARROW_FILE_MAGIC = b"ARROW1"
