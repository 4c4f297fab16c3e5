from voice_quiz_common.infrastructure.interfaces.storage import UploadStorage

__all__ = ["UploadStorage"]
