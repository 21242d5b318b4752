"""Custom exceptions for the tracking context."""


class AttemptLimitExceededError(Exception):
    """
    Exception raised when a resume has used all of its ATS analysis attempts.

    Attributes:
        attempts_used: Analyses already recorded for the resume
        max_attempts: Allowed analyses per resume
        resume_id: Resume identifier, if known
    """

    def __init__(self, attempts_used: int, max_attempts: int, resume_id: str = None):
        self.attempts_used = attempts_used
        self.max_attempts = max_attempts
        self.resume_id = resume_id

        message = f"Maximum ATS analysis attempts reached ({attempts_used}/{max_attempts})"
        if resume_id:
            message = f"{message} for resume {resume_id}"

        super().__init__(message)
