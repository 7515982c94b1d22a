"""
holds submodules related to inferring novel adjacencies from chimeric alignments and
classifying them as structural variants
"""
__version__ = '1.0.0'
