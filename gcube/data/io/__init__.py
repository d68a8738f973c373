from . import yaml
