class QuizEngineError(Exception):
    pass


class QuizConfigurationError(QuizEngineError):
    """Authored quiz data cannot be played."""


class NoQuestionsError(QuizConfigurationError):
    def __init__(self, quiz_id=None):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz {quiz_id} has no questions" if quiz_id else "Quiz has no questions")


class NoResultsError(QuizConfigurationError):
    def __init__(self, quiz_id=None):
        self.quiz_id = quiz_id
        super().__init__(f"Quiz {quiz_id} has no results" if quiz_id else "Quiz has no results")


class InvalidQuizContentError(QuizEngineError):
    pass


class UnknownOptionError(QuizEngineError):
    def __init__(self, question_id, option_id):
        self.question_id = question_id
        self.option_id = option_id
        super().__init__(f"Option {option_id} does not belong to question {question_id}")
