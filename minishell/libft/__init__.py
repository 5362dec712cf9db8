"""Character, string, conversion, buffer and descriptor output helpers used by the shell."""