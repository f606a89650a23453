import os


class Logger():
    """Appends resolution messages to a file, or prints them."""

    def __init__(self, name, filename=None, stdout=False):
        assert stdout or filename is not None, \
            "A logger needs either a file or stdout"
        self.name = name
        self.filename = filename
        self.stdout = stdout
        if not self.stdout:
            directory = os.path.dirname(self.filename)
            if directory:
                os.makedirs(directory, exist_ok=True)

    def log_info(self):
        msg = "\n{}\nResolver name: {}\n".format(10 * "=", self.name)
        self.log(msg)

    def log(self, msg):
        if self.stdout:
            print(msg)
        else:
            with open(self.filename, 'a') as out:
                out.write(str(msg))
                out.write('\n')
