from voice_quiz_common.infrastructure.interfaces import UploadStorage

__all__ = ["UploadStorage"]
