"""Model application tags.

An application names the problem domain a model solves. Values are
path-like strings so they can be written in configuration files.
"""

from __future__ import annotations

from enum import Enum


class Application(str, Enum):
    """Supported model applications."""

    UNDEFINED = "undefined"

    # Computer vision
    IMAGE_CLASSIFICATION = "cv/image_classification"
    OBJECT_DETECTION = "cv/object_detection"
    SEMANTIC_SEGMENTATION = "cv/semantic_segmentation"
    INSTANCE_SEGMENTATION = "cv/instance_segmentation"
    POSE_ESTIMATION = "cv/pose_estimation"
    ACTION_RECOGNITION = "cv/action_recognition"
    IMAGE_GENERATION = "cv/image_generation"

    # Natural language
    QUESTION_ANSWER = "nlp/question_answer"
    TEXT_CLASSIFICATION = "nlp/text_classification"
    SENTIMENT_ANALYSIS = "nlp/sentiment_analysis"
    TEXT_EMBEDDING = "nlp/text_embedding"
    TEXT_GENERATION = "nlp/text_generation"
    MACHINE_TRANSLATION = "nlp/machine_translation"

    # Other domains
    SPEECH_RECOGNITION = "audio/speech_recognition"
    TABULAR_REGRESSION = "tabular/linear_regression"
    TIME_SERIES_FORECASTING = "timeseries/forecasting"

    @property
    def path(self) -> str:
        return self.value

    @classmethod
    def of(cls, path: str) -> "Application":
        """Look up an application by its path (e.g., 'cv/object_detection').

        Raises:
            ValueError: If no application has that path
        """
        return cls(path.strip().lower())

    def __str__(self) -> str:
        return self.value
