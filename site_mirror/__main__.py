# site_mirror/__main__.py
from site_mirror.cli import cli

cli(prog_name="site-mirror")
