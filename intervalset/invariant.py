"""
Simple class-based invariants. Adapted from:
http://people.csail.mit.edu/pgbovine/wiki/doku.php?id=pythonclassinvariants

Provides a metaclass that will call _checkInvariant before and after every
public method and after construction. Also works for getters and setters.
Does NOT call for methods that start with _, including builtins like len or
eq, as these may be used internally at times when the invariant needs to be
temporarily violated. You must call _checkInvariant manually in such cases if
you wish to check invariants.

The metaclass derives from ABCMeta so abstract interfaces can enforce
invariants too, and subclasses pick it up automatically.
"""

import abc
import functools
import logging
import os
import types

_log = logging.getLogger(__name__)

_FALSE_VALUES = ("0", "false", "no", "off")

def _fromEnvironment(name, default=True):
  value = os.environ.get(name)
  if value is None:
    return default
  return value.strip().lower() not in _FALSE_VALUES

# This will have weird behavior if you change it while running; it is read when
# each class is created.
CHECK_INVARIANTS = _fromEnvironment("INTERVALSET_CHECK_INVARIANTS")

def public(func):
  @functools.wraps(func)
  def wrapper(self, *__args, **__kw):
    self._checkInvariant() # check before executing
    res = func(self, *__args, **__kw)
    self._checkInvariant() # check after executing
    return res
  return wrapper

def constructor(func):
  @functools.wraps(func)
  def wrapper(self, *__args, **__kw):
    func(self, *__args, **__kw)
    self._checkInvariant() # check after executing constructor
  return wrapper

def _wrapProperty(prop):
  return property(fget=prop.fget and public(prop.fget),
                  fset=prop.fset and public(prop.fset),
                  fdel=prop.fdel and public(prop.fdel),
                  doc=prop.__doc__)

class EnforceInvariant(abc.ABCMeta):
  def __new__(mcls, name, bases, attrs):
    if CHECK_INVARIANTS:
      for k in list(attrs):
        if k == '__init__':
          attrs[k] = constructor(attrs[k])
        # ignore private methods that start with '_' (and of course ignore
        # _checkInvariant itself)
        elif k[0] != '_':
          f = attrs[k]
          if isinstance(f, types.FunctionType):
            attrs[k] = public(f)
          elif isinstance(f, property):
            attrs[k] = _wrapProperty(f)
      _log.debug("enforcing invariants on %s", name)
    return super().__new__(mcls, name, bases, attrs)
