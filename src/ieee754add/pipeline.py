# SPDX-License-Identifier: LGPL-2.1-or-later
# See Notices.txt for copyright information

from ieee754add.fpcommon.fpbase import FPFormat
from ieee754add.fpcommon.clz import clz as default_clz


class PipelineSpec:
    """ Pipeline Specification.

    :attribute width: the IEEE754 FP bitwidth
    :attribute fpformat: the FPFormat for ``width``
    :attribute clz: the leading-zero counter used by normalisation,
        called as ``clz(value, bit_width)`` with a non-zero value.

    a PipelineSpec is handed to *every* stage of a pipeline.  it is
    never modified by a stage, so one instance may be shared freely.
    """

    def __init__(self, width=32, clz=None):
        """ Create a PipelineSpec. """
        self.width = width
        self.fpformat = FPFormat.standard(width)
        self.clz = clz or default_clz

    def __repr__(self):
        return "PipelineSpec(%d, clz=%s)" % (self.width,
                                             getattr(self.clz, "__name__",
                                                     self.clz))
