"""Rendering of the annotation and controller-argument reference pages from doc.yaml."""