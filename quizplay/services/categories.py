from enum import Enum


class QuizCategory(str, Enum):
    personality = "personality"
    fun = "fun"
    mbti = "mbti"
    love = "love"
    career = "career"


class QuizStatus(str, Enum):
    draft = "draft"
    published = "published"
