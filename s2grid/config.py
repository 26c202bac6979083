import os
import logging
from json import dumps
from json import loads
import numpy as np

logger = logging.getLogger("s2grid")

default_config = {"debug": True,
                  "ellipsoid": "wgs84",
                  "eager_lookup_tables": False,
                  "log_level": "WARNING"}


def get_config_filepath():
  if "S2GRID_CONFIG" in os.environ:
    return os.environ["S2GRID_CONFIG"]
  return os.path.join(os.getcwd(), "config.json")


def write_config(debug=True,
                 ellipsoid="wgs84",
                 eager_lookup_tables=False,
                 log_level="WARNING"):
  config_struct = {"debug": debug,
                   "ellipsoid": ellipsoid,
                   "eager_lookup_tables": eager_lookup_tables,
                   "log_level": log_level}
  with open(get_config_filepath(), "w") as config_file:
    config_file.write(dumps(config_struct, indent=2))


def parse_config_file():
  config_filename = get_config_filepath()
  config_vars = dict(default_config)
  if not os.path.isfile(config_filename):
    logger.info("No config file at %s, using default configuration", config_filename)
    return config_vars
  with open(config_filename, "r") as f:
    config_vars.update(loads(f.read()))
  return config_vars


def supports_uint64():
  """
  Report whether unsigned 64-bit integer arithmetic is available.

  Returns
  -------
  bool
      True if numpy provides a 64-bit unsigned dtype with the full
      [0, 2**64 - 1] range.

  Notes
  -----
  Cell ids are handled as Python integers masked to 64 bits,
  but vectorized helpers store them as `np.uint64`.
  """
  try:
    info = np.iinfo(np.uint64)
  except (AttributeError, ValueError):
    return False
  return info.bits == 64 and int(info.max) == 2**64 - 1


config_vars = parse_config_file()

DEBUG = config_vars["debug"]
DEFAULT_ELLIPSOID = config_vars["ellipsoid"]
EAGER_LOOKUP_TABLES = config_vars["eager_lookup_tables"]

logger.setLevel(config_vars["log_level"])

eps = 1e-11


def versatile_assert(should_be_true):
  if DEBUG:
    assert should_be_true
