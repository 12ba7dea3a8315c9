import os

def determine_output_file_path(input_path, output_path, output_default_extension):
  """
  Output file of a command line tool:
    - `None` or '-' means the standard output, returned as `None`,
    - a directory means a file in this directory, named after the input file,
    - anything else is used as is.
  """
  if output_path is None or output_path == '-':
    return None
  elif os.path.isdir(output_path):
    if input_path is None or input_path == '-':
      file_name_base = 'stdin'
    else:
      file_name = os.path.basename(input_path)
      file_name_base,_ = os.path.splitext(file_name)
    return os.path.join(output_path, file_name_base+output_default_extension)
  else:
    return output_path
