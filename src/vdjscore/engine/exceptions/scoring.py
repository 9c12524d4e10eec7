class NoSuchSubstitutionMatrixException(ValueError):
    def __init__(self, matrix_name: str, *args):
        super().__init__(f"No substitution matrix named \"{matrix_name}\" is bundled with Biopython.", *args)
        self.matrix_name = matrix_name
