import numpy as np

def sizes_to_indices(nb_array, dtype=None):
  """ Create and offset array from a size array """
  nptype = dtype if dtype else np.asarray(nb_array).dtype
  offset_array = np.empty(len(nb_array)+1, dtype=nptype)
  offset_array[0] = 0
  np.cumsum(nb_array, out=offset_array[1:])
  return offset_array

def group_by_key(keys, n_key, values=None):
  """
  Gather the positions (or the values, if given) of a key array into a strided array
  (idx+array) with one slice per key in [0, n_key).
  Inside a slice, the original order of appearance is preserved (stable sort).
  """
  keys = np.asarray(keys)
  order = np.argsort(keys, kind='stable')
  counts = np.bincount(keys, minlength=n_key)
  idx = sizes_to_indices(counts, dtype=np.int64)
  if values is None:
    return idx, order
  else:
    return idx, np.asarray(values)[order]

def all_in_range(array, start, end, strict=False):
  """
  Return True if all the elements of array are in interval
  [start, end]. In is large by defaut and strict is strict==True
  """
  np_array = np.asarray(array)
  return ((start <  np_array) & (np_array <  end)).all() if strict\
    else ((start <= np_array) & (np_array <= end)).all()
