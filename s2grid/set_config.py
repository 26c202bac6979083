from argparse import ArgumentParser
from s2grid.config import write_config


if __name__ == "__main__":
  parser = ArgumentParser(prog='s2grid_config',
                          description='Write the s2grid configuration file.')
  parser.add_argument('-e', '--ellipsoid', default="wgs84")
  parser.add_argument('-t', '--eager_lookup_tables', action='store_true', default=False)
  parser.add_argument('-r', '--release', action='store_true', default=False)
  parser.add_argument('-l', '--log_level', default="WARNING")

  args = parser.parse_args()
  valid_ellipsoids = ["wgs84", "unit_sphere"]
  assert args.ellipsoid in valid_ellipsoids, f"Invalid ellipsoid: {args.ellipsoid}, must be one of {valid_ellipsoids}"
  write_config(debug=not args.release,
               ellipsoid=args.ellipsoid,
               eager_lookup_tables=args.eager_lookup_tables,
               log_level=args.log_level.upper())
