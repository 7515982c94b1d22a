class BreakpointInferenceError(Exception):
    """
    raised when the breakpoint locations and event type cannot be inferred from the
    chimeric alignment evidence

    Attributes:
        chimera_description: text dump of the offending chimeric alignment
    """

    def __init__(self, message, chimera_description=''):
        Exception.__init__(self, message)
        self.chimera_description = chimera_description


class UnreachableClassificationError(AssertionError):
    """
    raised when a coarse type tag outside the recognized set reaches the classifier.
    indicates a defect in whatever produced the tag
    """

    pass


class MalformedComplicationsError(TypeError):
    """
    raised when a classification branch requires a specific kind of breakpoint
    complications and is given an incompatible one
    """

    pass
