"""Author landing-page backend: experiments and platform statistics."""
