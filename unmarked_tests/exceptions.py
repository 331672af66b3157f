class UnmarkedTestsError(Exception):
    pass


class UnreadableFileError(UnmarkedTestsError):
    def __init__(self, file_path, reason):
        self.file_path = file_path
        self.reason = reason

    def __str__(self):
        return f"Unable to read {self.file_path}: {self.reason}"


class EmptyListError(UnmarkedTestsError):
    def __init__(self, value):
        self.value = value

    def __str__(self):
        return f"No names found in: {self.value!r}"


class ConfigFileError(UnmarkedTestsError):
    def __init__(self, config_file, reason):
        self.config_file = config_file
        self.reason = reason

    def __str__(self):
        return f"Invalid config file {self.config_file}: {self.reason}"
