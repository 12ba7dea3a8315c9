"""
Named loggers with pluggable printers.

A logger is identified by its name. It forwards each message to the printers
that are attached to it. A printer is any object with a `log(self, msg)` method.
Built-in printers can also be attached by name (see `add_printer_to_logger`).

Loggers are regular `logging` loggers that do not propagate to the root logger,
so that the application logging configuration is not disturbed.
"""
import ast
import os
import re
import sys
import logging as LOG


class stdout_printer:
  def log(self, msg):
    sys.stdout.write(msg)
    sys.stdout.flush()

class stderr_printer:
  def log(self, msg):
    sys.stderr.write(msg)
    sys.stderr.flush()

class file_printer:
  def __init__(self, file_name):
    self.file_name = file_name
  def log(self, msg):
    with open(self.file_name, 'a') as f:
      f.write(msg)

_printer_types = {
  'stdout_printer' : stdout_printer,
  'stderr_printer' : stderr_printer,
  'file_printer'   : file_printer,
}


class _printer_handler(LOG.Handler):
  """ Adapts a printer to the `logging.Handler` interface """
  def __init__(self, printer):
    super().__init__(level=LOG.DEBUG)
    self.printer = printer

  def emit(self, record):
    self.printer.log(self.format(record) + '\n')


_loggers = {}

def add_logger(logger_name, replace=False):
  """ Declare a logger. If `replace`, an already declared logger loses its printers and is turned on """
  if logger_name in _loggers and not replace:
    return
  logger = LOG.getLogger(logger_name)
  for handler in list(logger.handlers):
    logger.removeHandler(handler)
  logger.setLevel(LOG.DEBUG)
  logger.propagate = False
  logger.disabled = False
  _loggers[logger_name] = logger

def _get_logger(logger_name):
  try:
    return _loggers[logger_name]
  except KeyError:
    raise ValueError(f"Logger '{logger_name}' has not been declared (see `add_logger`)") from None

def add_printer_to_logger(logger_name, p, *args):
  """
  Attach printer `p` to logger `logger_name`.
  `p` is either an object with a `log(msg)` method,
  or the name of a built-in printer ('stdout_printer', 'stderr_printer', 'file_printer'),
  in which case `args` are given to its constructor.
  """
  if isinstance(p, str):
    if p not in _printer_types:
      raise ValueError(f"Unknown printer '{p}'. Known printers are {list(_printer_types.keys())}")
    p = _printer_types[p](*args)
  _get_logger(logger_name).addHandler(_printer_handler(p))

def log(logger_name, msg):
  _get_logger(logger_name).info(msg)

def turn_on(logger_name):
  _get_logger(logger_name).disabled = False

def turn_off(logger_name):
  _get_logger(logger_name).disabled = True

def has_printer(logger_name) -> bool:
  return len(_get_logger(logger_name).handlers) > 0


# Configuration file {
## One logger per line: `logger_name : printer_0, printer_1('arg')`
_printer_re = re.compile(r"\s*(\w+)\s*(?:\((.*?)\))?\s*(?:,|$)")

def _parse_printers(s):
  printers = []
  pos = 0
  s = s.strip()
  while pos < len(s):
    m = _printer_re.match(s, pos)
    if m is None or m.end() == pos:
      raise ValueError(f"Can not parse printer list '{s}'")
    name, args = m.group(1), m.group(2)
    if args is None or args.strip() == '':
      args = ()
    else:
      args = ast.literal_eval(args.strip() + ',') # always a tuple
    printers.append((name, args))
    pos = m.end()
  return printers

def parse_conf(conf_stream):
  """ Return the list of `(logger_name, [(printer_name, args), ...])` described by a configuration text """
  conf = []
  for i, line in enumerate(conf_stream.splitlines()):
    line = line.split('#', 1)[0].strip()
    if line == '':
      continue
    if ':' not in line:
      raise ValueError(f"Line {i+1} of logging configuration should be of the form "
                        "`logger_name : printer_0, printer_1('arg')`")
    logger_name, printers = line.split(':', 1)
    conf.append((logger_name.strip(), _parse_printers(printers)))
  return conf

def load_conf_file(file_name):
  """ Configure the loggers from a file. Loggers named in the file lose their previous printers """
  with open(file_name) as f:
    conf = parse_conf(f.read())
  for logger_name, printers in conf:
    add_logger(logger_name, replace=True)
    for printer_name, args in printers:
      add_printer_to_logger(logger_name, printer_name, *args)
# Configuration file }


def size_to_str(size):
  units = ["", "K", "M", "G", "T", "P", "E", "Z", "Y"]
  i = 0
  if size < 1000: #Corner case with no decimal
    return "{0}".format(size)
  while(size > 1000.):
      size /= 1000.
      i += 1
  return "{0:.1f}{1}".format(size, units[i])

def info(msg):
  log("dfs_ancestry", msg)
def stat(msg):
  log("dfs_ancestry-stats", msg)
def warning(msg):
  log("dfs_ancestry-warnings", "Warning: "+msg)
def error(msg):
  log("dfs_ancestry-errors", "Error: "+msg)


def _add_default_loggers():
  add_logger("dfs_ancestry")
  add_logger("dfs_ancestry-stats")
  add_logger("dfs_ancestry-warnings")
  add_logger("dfs_ancestry-errors")
  if not has_printer("dfs_ancestry-warnings"):
    add_printer_to_logger("dfs_ancestry-warnings", "stderr_printer")
  if not has_printer("dfs_ancestry-errors"):
    add_printer_to_logger("dfs_ancestry-errors", "stderr_printer")

_add_default_loggers()

LOGGING_CONF_ENV_VAR = 'DFS_ANCESTRY_LOGGING_CONF'
if os.environ.get(LOGGING_CONF_ENV_VAR):
  load_conf_file(os.environ[LOGGING_CONF_ENV_VAR])
