"""
Generators — produce the files of a new C/C++ project.

Each generator module exposes ``generate_*()`` functions that return a
``GeneratedFile``. Nothing here touches the filesystem; writing is the
scaffold service's job.
"""
