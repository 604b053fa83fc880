# SPDX-FileCopyrightText: Copyright (c) 2026, NVIDIA CORPORATION. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

import functools

cuda_kernel_defines_template = """
#define image_t     {image_t}   // sample type of the input and output image
#define IMAGE_MAX   {image_max} // largest value representable by image_t
"""

cuda_kernel_code = r'''
extern "C" {
__global__ void int_hist(const image_t *image, int *hist, int total_size)
{
  const unsigned int id = blockIdx.x * blockDim.x + threadIdx.x;

  if (id < total_size) {
    atomicAdd(&hist[image[id]], 1);
  }
}

// Hillis-Steele inclusive scan of n values by a single block of n threads.
// scratch holds two buffers of n ints; src selects the one holding the
// values of the previous round.
__global__ void cum_hist(const int *hist, int *cum, int n)
{
  extern __shared__ int scratch[];

  const int lid = threadIdx.x;
  int src = 0;

  scratch[lid] = hist[lid];
  __syncthreads();

  for (int stride = 1; stride < n; stride *= 2) {
    const int dst = 1 - src;
    if (lid >= stride) {
      scratch[dst * n + lid] = scratch[src * n + lid] +
                               scratch[src * n + lid - stride];
    } else {
      scratch[dst * n + lid] = scratch[src * n + lid];
    }
    __syncthreads();
    src = dst;
  }

  cum[lid] = scratch[src * n + lid];
}

__global__ void norm_hist(const int *cum, int *lut, int image_size,
                          int bin_count)
{
  const unsigned int id = blockIdx.x * blockDim.x + threadIdx.x;

  if (id < bin_count) {
    const int scale = image_size / bin_count;
    lut[id] = cum[id] / scale;
  }
}

__global__ void back_project(const image_t *image, const int *lut,
                             image_t *out, int total_size)
{
  const unsigned int id = blockIdx.x * blockDim.x + threadIdx.x;

  if (id < total_size) {
    out[id] = (image_t)min(lut[image[id]], IMAGE_MAX);
  }
}
}'''

_image_types = {
    "uint8": ("unsigned char", 255),
    "uint16": ("unsigned short", 65535),
}


@functools.lru_cache()
def get_cuda_kernel_code(dtype_name="uint8"):
    """CUDA source of the equalization kernels for one image sample type."""
    try:
        image_t, image_max = _image_types[dtype_name]
    except KeyError:
        raise ValueError(
            f"no CUDA image type for dtype {dtype_name}"
        ) from None
    code = cuda_kernel_defines_template.format(
        image_t=image_t, image_max=image_max
    )
    return code + cuda_kernel_code
