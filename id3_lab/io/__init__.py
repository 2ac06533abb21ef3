from .loader import frame_to_dataset, load_dataset

__all__ = ["frame_to_dataset", "load_dataset"]
