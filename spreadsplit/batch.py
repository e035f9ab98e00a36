"""
Split down the middle, over a batch of sources.

The typical example is A3 to two A4s, or a scan of a book laid open. Every
page of every source is cut in two down the middle, vertically for landscape
pages and horizontally for portrait pages, so each output holds twice the
pages of its source.
"""

import logging
from contextlib import contextmanager

from .documents import Permission, PypdfOpener
from .naming import generate_name
from .output import OutputRegistry, create_temporary_buffer
from .progress import BatchProgress, LoggingProgressNotifier
from .repagination import repaginate
from .splitter import split_document

logger = logging.getLogger(__name__)


def close_quietly(handle) -> None:
    """Close a handle, logging instead of raising if that fails."""
    if handle is None:
        return
    try:
        handle.close()
    except Exception:
        logger.warning("Unable to close %s", getattr(handle, "name", handle), exc_info=True)


@contextmanager
def scoped(handle):
    try:
        yield handle
    finally:
        close_quietly(handle)


def process_source(source, sequence, parameters, opener, registry, namer=generate_name):
    """Split one source into a temporary buffer and register it in `registry`."""
    logger.debug("Opening %s", source)
    with scoped(source.open(opener)) as source_handle:
        source_handle.ensure_permission(Permission.COPY_AND_EXTRACT)

        with scoped(opener.create()) as destination:
            destination.set_format_version(parameters.version)
            destination.initialise_from(source_handle)

            pages = split_document(source_handle, destination)
            logger.debug("Split %d pages of %s into %d pages", pages, source, destination.page_count())

            repaginate(destination, parameters.repagination)

            buffer = create_temporary_buffer()
            logger.debug("Created output on temporary buffer %s", buffer)
            try:
                destination.save(buffer)
                name = namer(parameters.output_prefix, source.name, sequence)
                registry.add_output(buffer, name)
            except Exception:
                buffer.unlink(missing_ok=True)
                raise
    return name


def run_batch(parameters, opener=None, notifier=None, namer=generate_name):
    """
    Split every source in `parameters.source_list` and commit the results to
    `parameters.output`.

    Any error aborts the batch, nothing is committed and the temporary buffers
    produced so far are removed.
    """
    parameters.validate()
    opener = opener or PypdfOpener()
    notifier = notifier or LoggingProgressNotifier()

    progress = BatchProgress(len(parameters.source_list))
    registry = OutputRegistry(parameters.overwrite)

    try:
        for sequence, source in enumerate(parameters.source_list, start=1):
            process_source(source, sequence, parameters, opener, registry, namer)
            notifier.report(progress.advance(), progress.total_steps)

        registry.commit(parameters.output)
    except Exception:
        registry.discard()
        raise

    logger.debug("Input documents split and written to %s", parameters.output)
    return progress
