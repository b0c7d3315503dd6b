import os


def read_lines(filename):
    '''Return the non-blank lines of a file in the data directory, with '#' comments
    removed.'''
    result = []
    with open(os.path.join(os.path.dirname(__file__), 'data', filename)) as f:
        for line in f:
            hash_pos = line.find('#')
            if hash_pos != -1:
                line = line[:hash_pos]
            line = line.strip()
            if line:
                result.append(line)
    return result
