"""Leaf statistic catalogs of the sampled models.

One :class:`~dumpctl.domain.fields.FieldId` table per model. Scalar fields
use bare names; fields of a nested sub-model are ``<submodel>.<field>``.
Declaration order is the enumeration order used by help and ``--detail``.
"""
