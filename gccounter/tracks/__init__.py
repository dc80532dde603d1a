# This file is part of gccounter.
# Licensed under MIT License.


def get_writer_class(track_format):
    """Get the track writer class matching a format name

    Args:
        track_format (str): ``bigwig`` or ``bedgraph``.

    Returns:
        TrackWriter subclass
    """
    if track_format == 'bigwig':
        from .bigwig import BigWigWriter

        return BigWigWriter
    elif track_format == 'bedgraph':
        from .bedgraph import BedGraphWriter

        return BedGraphWriter
    else:
        raise NotImplementedError(
            f'Unknown track format "{track_format}". Use "bigwig" or "bedgraph".'
        )
